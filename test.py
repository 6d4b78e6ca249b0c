import random  # Per scegliere endpoint casuali nello stress test
import threading  # Per eseguire richieste concorrenti su più thread

import requests  # Libreria HTTP sincrona per testare gli endpoint

BASE_URL = "http://127.0.0.1:3000"  # Base URL del web server (web_server.py, porta di default 3000)

# ---------------------------
# Test singoli endpoint
# ---------------------------
def test_get_home():
    print(">>> GET home")
    r = requests.get(f"{BASE_URL}/")  # Pagina principale
    print(r.status_code, len(r.text))  # Stampa status + dimensione HTML

def test_post_kaomoji():
    print(">>> POST kaomoji word='I am happy'")
    r = requests.post(f"{BASE_URL}/", data={"word": "I am happy"})  # Chiama OpenAI lato server
    print(r.status_code, "kaomoji" in r.text, "error" in r.text)

def test_post_kaomoji_empty():
    print(">>> POST kaomoji senza parola")
    r = requests.post(f"{BASE_URL}/", data={})  # Nessuna chiamata esterna, pagina base
    print(r.status_code, len(r.text))

def test_get_random_color():
    print(">>> GET hello-node?randomize=true")
    r = requests.get(f"{BASE_URL}/hello-node", params={"randomize": "true"})  # Colore casuale
    print(r.status_code, "color-result" in r.text)

def test_post_color_found():
    print(">>> POST colore 'Sky Blue'")
    r = requests.post(f"{BASE_URL}/hello-node", data={"color": "Sky Blue"})  # Normalizzato in 'skyblue'
    print(r.status_code, "#87CEEB" in r.text)

def test_post_color_notfound():
    print(">>> POST colore inesistente 'chartreuse9'")
    r = requests.post(f"{BASE_URL}/hello-node", data={"color": "chartreuse9"})  # Nessun colore: messaggio d'errore
    print(r.status_code, "chartreuse9" in r.text)

def test_get_static():
    print(">>> GET style.css")
    r = requests.get(f"{BASE_URL}/style.css")  # File statico da public/
    print(r.status_code, r.headers.get("Content-Type"))

# ---------------------------
# Stress test multi-thread
# ---------------------------
def stress_worker(n):
    """Worker che fa N richieste casuali"""
    for _ in range(n):
        method, path, data = random.choice([
            ("GET", "/", None),  # Home
            ("GET", "/hello-node?randomize=true", None),  # Colore casuale
            ("POST", "/hello-node", {"color": "rebecca purple"}),  # Ricerca colore
            ("POST", "/hello-node", {"color": "notacolor"}),  # Ricerca fallita
        ])
        try:
            r = requests.request(method, BASE_URL + path, data=data, timeout=2)  # Timeout breve per non bloccare
            print(f"[{threading.current_thread().name}] {method} {path} -> {r.status_code}")
        except requests.RequestException as e:
            print(f"[{threading.current_thread().name}] Errore: {e}")  # Logga eventuali errori di rete

def run_stress(num_threads=5, req_per_thread=10):
    print(f">>> Stress test con {num_threads} thread x {req_per_thread} richieste")
    threads = []
    for i in range(num_threads):
        t = threading.Thread(target=stress_worker, args=(req_per_thread,), name=f"T{i}")  # Crea thread worker
        threads.append(t)
        t.start()  # Avvia thread
    for t in threads:
        t.join()  # Attende il completamento di tutti i thread

# ---------------------------
# Main
# ---------------------------
if __name__ == "__main__":
    # Esegue i test singoli
    test_get_home()
    test_post_kaomoji()
    test_post_kaomoji_empty()
    test_get_random_color()
    test_post_color_found()
    test_post_color_notfound()
    test_get_static()

    # Stress test (niente POST / per non consumare quota OpenAI)
    run_stress(num_threads=10, req_per_thread=20)
