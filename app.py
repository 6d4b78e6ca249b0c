import random  # Sorgente uniforme per il colore casuale

from flask import Flask, render_template, request  # Import necessari per rotte e template
from flask_cors import CORS  # Per abilitare CORS

from colors import load_colors  # Tabella colori statica
from config import BASE_DIR, Settings, load_seo  # Impostazioni e metadati SEO
from contexts import (  # Costruttori dei contesti di rendering
    COLOR_TEMPLATE,
    INDEX_TEMPLATE,
    base_params,
    build_color_params,
    build_index_params,
    build_random_color_params,
    check_params,
    parse_flag,
)
from generation import KaomojiGenerator  # Client per la generazione dei kaomoji


def create_app(settings=None, seo=None, colors=None, generator=None, rng=random.random) -> Flask:
    """Build the Flask app; missing dependencies are created from ``settings``.

    Loading the SEO record or the color table raises ConfigError when the
    files are missing or malformed.
    """
    settings = settings or Settings()
    if seo is None:
        seo = load_seo(settings.SEO_PATH, settings.PROJECT_DOMAIN)
    if colors is None:
        colors = load_colors(settings.COLORS_PATH)
    if generator is None:
        generator = KaomojiGenerator.from_settings(settings)

    # File statici da public/ serviti direttamente sotto "/"
    app = Flask(
        __name__,
        static_folder=str(BASE_DIR / "public"),
        static_url_path="",
        template_folder=str(BASE_DIR / "templates"),
    )
    CORS(app, origins=settings.CORS_ORIGINS)  # Abilita CORS

    def render(template: str, params: dict):
        # Verifica che il contesto corrisponda ai campi del template
        return render_template(template, **check_params(template, params))

    # ---------- Web Endpoints ----------
    @app.route('/', methods=['GET'])
    def homepage():
        """Serves the main homepage."""
        return render(INDEX_TEMPLATE, base_params(seo))

    @app.route('/', methods=['POST'])
    def kaomoji():
        """Generates a kaomoji for the submitted word; errors are shown in the page."""
        params = build_index_params(seo, request.form.get('word'), generator)
        return render(INDEX_TEMPLATE, params)

    @app.route('/hello-node', methods=['GET'])
    def hello_node():
        """Color page; ?randomize=true picks a random color."""
        randomize = parse_flag(request.args.get('randomize'))
        params = build_random_color_params(seo, randomize, colors, rng)
        return render(COLOR_TEMPLATE, params)

    @app.route('/hello-node', methods=['POST'])
    def hello_node_color():
        """Looks up the submitted color name; a miss is shown in the page."""
        params = build_color_params(seo, request.form.get('color'), colors)
        return render(COLOR_TEMPLATE, params)

    return app
