import yaml
from pathlib import Path
from flask import request, g, current_app

TRANSLATIONS_DIR = Path(__file__).resolve().parent.parent / 'translations'

# Cache for translations
_translations_cache = {}
_translation_file_times = {}


def load_translations():
    """Load translations from YAML files with hot-reloading in debug mode"""
    global _translations_cache

    # In production, use cached translations
    if not current_app.debug and _translations_cache:
        return _translations_cache

    files = sorted(TRANSLATIONS_DIR.glob('*.yaml'))

    reload_needed = False
    for file_path in files:
        current_mtime = file_path.stat().st_mtime
        if _translation_file_times.get(file_path) != current_mtime:
            _translation_file_times[file_path] = current_mtime
            reload_needed = True

    if reload_needed or not _translations_cache:
        print("[Translations] Reloading language files...")
        translations = {}
        for file_path in files:
            with open(file_path, 'r', encoding='utf-8') as f:
                translations[file_path.stem] = yaml.safe_load(f) or {}
        if not translations:
            print(f"Warning: No translation files found in {TRANSLATIONS_DIR}")
        _translations_cache = translations

    return _translations_cache


def get_translations():
    """Get current translations (with hot-reloading in debug mode)"""
    return load_translations()


def get_language():
    """Pick the first Accept-Language entry we have translations for"""
    if hasattr(g, 'language'):
        return g.language

    default = current_app.config.get('DEFAULT_LANGUAGE', 'en')
    available = get_translations()

    g.language = default
    for code, _quality in request.accept_languages:
        primary = code.split('-')[0].lower()
        if primary in available:
            g.language = primary
            break

    return g.language


def t(key, *args, **kwargs):
    """Translate key to current language, falling back to the key itself"""
    lang = get_language()
    translations = get_translations()
    default = current_app.config.get('DEFAULT_LANGUAGE', 'en')
    translation = translations.get(lang, {}).get(key, translations.get(default, {}).get(key, key))

    # Handle string formatting
    if args or kwargs:
        try:
            if kwargs:
                return translation.format(**kwargs)
            else:
                return translation.format(*args)
        except (IndexError, KeyError, ValueError) as e:
            print(f"Warning: Translation formatting error for key '{key}': {e}")
            return translation

    return translation
