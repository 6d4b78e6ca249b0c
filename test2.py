import asyncio  # Per gestire concorrenza asincrona
import random  # Per scegliere endpoint casuali
import time  # Per misurare tempi e calcolare RPS

import aiohttp  # Client HTTP asincrono ad alte prestazioni

BASE_URL = "http://127.0.0.1:3000"  # Web server (web_server.py) porta 3000

# Richieste da bombardare nello stress test: (metodo, path, form)
REQUESTS = [
    ("GET", "/", None),
    ("GET", "/hello-node", None),
    ("GET", "/hello-node?randomize=true", None),
    ("POST", "/hello-node", {"color": "Sky Blue"}),
    ("POST", "/hello-node", {"color": "chartreuse9"}),
    ("GET", "/style.css", None),
]

async def fetch(session, method, url, data):
    # Effettua la richiesta con timeout; ritorna solo lo status code
    try:
        async with session.request(method, url, data=data, timeout=aiohttp.ClientTimeout(total=3)) as resp:
            return resp.status
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        return f"ERR:{type(e).__name__}"  # In caso di errore di rete/timeout

async def worker(session, num_requests, results):
    # Esegue num_requests richieste casuali; results raccoglie (endpoint, status)
    for _ in range(num_requests):
        method, path, data = random.choice(REQUESTS)
        status = await fetch(session, method, BASE_URL + path, data)
        results.append((f"{method} {path}", status))

async def run_stress(total_requests=10000, concurrency=100):
    # Lancia molti worker in parallelo per generare carico
    tasks = []
    results = []
    async with aiohttp.ClientSession() as session:
        # Quante richieste per ogni worker in base alla concorrenza
        req_per_worker = total_requests // concurrency
        for _ in range(concurrency):
            tasks.append(worker(session, req_per_worker, results))
        start = time.time()  # Inizio misura tempo
        await asyncio.gather(*tasks)  # Esegue tutti i task
        elapsed = time.time() - start  # Tempo totale trascorso
        print("\n--- Stress test completato ---")
        print(f"Totale richieste: {len(results)}")
        print(f"Tempo totale: {elapsed:.2f} s")
        print(f"RPS (Requests/sec): {len(results)/elapsed:.2f}")

        # Riassume i codici di risposta per endpoint
        summary = {}
        for endpoint, status in results:
            per_endpoint = summary.setdefault(endpoint, {})
            per_endpoint[status] = per_endpoint.get(status, 0) + 1
        print("\nRisultati per endpoint:")
        for endpoint in sorted(summary):
            codes = ", ".join(f"{k}={v}" for k, v in summary[endpoint].items())
            print(f"{endpoint:<32} {codes}")

if __name__ == "__main__":
    # Avvia lo stress test con 5k richieste e concorrenza 50
    asyncio.run(run_stress(total_requests=5000, concurrency=50))
