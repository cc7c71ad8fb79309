from __future__ import annotations
from config import load_config
from publisher.front_matter import build_front_matter_dict, front_matter_text

def get_content(properties: dict) -> str:
    content = properties.get("content")
    if not content:
        return ""
    if isinstance(content, dict):
        content = content.get("text") or content.get("html") or content
    return f"\n{content}\n"

def get_front_matter(properties: dict, permalink_scope: str) -> str:
    return front_matter_text(build_front_matter_dict(properties, permalink_scope))

def get_post_template(properties: dict, permalink_scope: str | None = None) -> str:
    """Render JF2 properties as an Eleventy content file: YAML front matter, then the body.

    permalink_scope is "any" or "page"; when omitted it is read from config.
    """
    if permalink_scope is None:
        permalink_scope = load_config()["permalink_scope"]

    content = get_content(properties)
    front_matter = get_front_matter(properties, permalink_scope)
    return front_matter + content
