import yaml
from pathlib import Path

CONTENT_FILE = Path(__file__).resolve().parent.parent / 'content' / 'site.yaml'

_content_cache = {}


def load_site_content(path=CONTENT_FILE):
    """Load static page content (about page, footer, sidebars) from YAML"""
    path = Path(path)
    if path not in _content_cache:
        with open(path, 'r', encoding='utf-8') as f:
            _content_cache[path] = yaml.safe_load(f) or {}
    return _content_cache[path]


def page_content(section):
    return load_site_content().get(section, {})
