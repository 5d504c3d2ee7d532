# variants.py
from __future__ import annotations

from . import settings
from .dsl import ensure_manifest, mkdir, npm_script, page, say, sh, template, variant
from .model import Variant
from .runner import InvalidSelection

VITE = "Install Tailwind CSS with Vite"
MIX = "Install Tailwind CSS with Laravel Mix(still error)"
BARE = "Create a new Laravel project without Tailwind CSS"
CLI_ONLY = "Install Tailwind CSS CLI Only"

WELCOME_VIEW = "resources/views/welcome.blade.php"

_NPM = settings.NPM
_NPX = settings.NPX
_TAILWIND_DEPS = "tailwindcss postcss autoprefixer"

WATCH_CSS = "npx tailwindcss -i ./src/input.css -o ./src/output.css --watch"


def base_scaffold_command() -> str:
    return f"{settings.COMPOSER} create-project --prefer-dist laravel/laravel ./"


VARIANTS: dict[str, Variant] = {
    v.label: v
    for v in (
        variant(
            VITE,
            say("Installing Tailwind CSS with Vite..."),
            sh("Install Tailwind CSS", f"{_NPM} install -D {_TAILWIND_DEPS}"),
            sh("Init Tailwind CSS", f"{_NPX} tailwindcss init -p"),
            template("tailwind.config.js", "tailwind.config.laravel.js"),
            template("resources/css/app.css", "app.css"),
            page(WELCOME_VIEW, "vite"),
            notes=(
                "Installation completed!",
                'Running "php artisan serve" in a new terminal...',
            ),
            watch=sh("Vite dev server", f"{_NPM} run dev"),
        ),
        variant(
            MIX,
            say("Installing Tailwind CSS with Laravel Mix..."),
            sh("Install Tailwind CSS", f"{_NPM} install -D {_TAILWIND_DEPS}"),
            sh("Init Tailwind CSS", f"{_NPX} tailwindcss init"),
            template("tailwind.config.js", "tailwind.config.laravel.js"),
            template("resources/css/app.css", "app.css"),
            template("webpack.mix.js", "webpack.mix.js"),
            sh("Install dependencies", f"{_NPM} install"),
            sh("Mix watch", f"{_NPM} run watch"),
            page(WELCOME_VIEW, "mix"),
        ),
        variant(
            BARE,
            say("Your Laravel project setup is complete without Tailwind CSS!"),
            page(WELCOME_VIEW, "cdn"),
        ),
        variant(
            CLI_ONLY,
            say("Installing Tailwind CSS CLI..."),
            sh("Install Tailwind CSS", f"{_NPM} install -D tailwindcss"),
            sh("Init Tailwind CSS", f"{_NPX} tailwindcss init"),
            template("tailwind.config.js", "tailwind.config.cli.js"),
            mkdir("src"),
            template("src/input.css", "app.css"),
            npm_script("dev", WATCH_CSS),
            page("src/index.html", "cli"),
            base_scaffold=False,
            prepare=(ensure_manifest(),),
            notes=(
                "Congratulations! Tailwind CSS CLI installation is complete.",
                "Open src/index.html with a server to see the result.",
            ),
            watch=sh("Tailwind CSS watcher", f"{_NPM} run dev"),
        ),
    )
}

LABELS: list[str] = list(VARIANTS)


def get_variant(label: str) -> Variant:
    try:
        return VARIANTS[label]
    except KeyError:
        raise InvalidSelection(label) from None
