import pytest

from laratail import content
from laratail.model import EnsureManifest, RunCommand, WriteFile
from laratail.runner import InvalidSelection
from laratail.variants import BARE, CLI_ONLY, LABELS, MIX, VITE, get_variant


def _writes(variant):
    return [s for s in variant.steps if isinstance(s, WriteFile)]


def test_labels_in_prompt_order():
    assert LABELS == [VITE, MIX, BARE, CLI_ONLY]


def test_unknown_label_is_invalid_selection():
    with pytest.raises(InvalidSelection) as exc:
        get_variant("Install Bootstrap")
    assert str(exc.value) == "Invalid setup type."


def test_only_cli_variant_skips_base_scaffold():
    assert [get_variant(label).requires_base_scaffold for label in LABELS] == [True, True, True, False]


def test_watchers():
    assert get_variant(VITE).launches_watcher
    assert get_variant(CLI_ONLY).launches_watcher
    assert not get_variant(MIX).launches_watcher
    assert not get_variant(BARE).launches_watcher


def test_bare_variant_writes_cdn_welcome_only():
    writes = _writes(get_variant(BARE))
    assert [w.path for w in writes] == ["resources/views/welcome.blade.php"]
    assert '<link href="https://cdn.jsdelivr.net/npm/tailwindcss' in writes[0].contents
    assert not any(isinstance(s, RunCommand) for s in get_variant(BARE).steps)


def test_vite_variant_files():
    writes = {w.path: w.contents for w in _writes(get_variant(VITE))}
    assert set(writes) == {"tailwind.config.js", "resources/css/app.css", "resources/views/welcome.blade.php"}
    assert writes["resources/css/app.css"] == "@tailwind base;\n@tailwind components;\n@tailwind utilities;"
    assert "@vite('resources/css/app.css')" in writes["resources/views/welcome.blade.php"]


def test_mix_variant_writes_build_pipeline_and_compiled_link():
    writes = {w.path: w.contents for w in _writes(get_variant(MIX))}
    assert "require('tailwindcss')" in writes["webpack.mix.js"]
    assert "{{ asset('css/app.css') }}" in writes["resources/views/welcome.blade.php"]


def test_cli_variant_targets_src():
    writes = {w.path: w.contents for w in _writes(get_variant(CLI_ONLY))}
    assert "./src/**/*.{html,js}" in writes["tailwind.config.js"]
    assert 'href="./output.css"' in writes["src/index.html"]


def test_landing_pages_share_body():
    vite = content.landing_page("vite")
    cdn = content.landing_page("cdn")
    assert vite.endswith("</html>")
    assert vite.split("<body", 1)[1] == cdn.split("<body", 1)[1]
    assert vite == vite.strip()


def test_vite_notes_keep_original_wording():
    assert get_variant(VITE).notes == (
        "Installation completed!",
        'Running "php artisan serve" in a new terminal...',
    )


def test_cli_variant_prepares_manifest_first():
    assert get_variant(CLI_ONLY).prepare == (EnsureManifest(),)
    assert not any(isinstance(s, EnsureManifest) for s in get_variant(CLI_ONLY).steps)
