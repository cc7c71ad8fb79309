from __future__ import annotations
import datetime, re, yaml
from publisher.permalink import PERMALINK_ANY, url_to_permalink

_HUMP_RE = re.compile(r"([a-z0-9])([A-Z])")
_SEP_RE = re.compile(r"[-_.\s]+")

# Shown below the front matter or replaced by an Eleventy field
DROPPED_KEYS = (
    "content",     # body
    "name",        # title
    "postStatus",  # draft
    "published",   # date
    "slug",        # page.fileSlug
    "type",
)

def camelcase(key: str) -> str:
    words = [w.lower() for w in _SEP_RE.split(_HUMP_RE.sub(r"\1-\2", key)) if w]
    if not words:
        return key
    return words[0] + "".join(w[:1].upper() + w[1:] for w in words[1:])

def camelcase_keys(value):
    """Copy of value with every mapping key camelCased, nested ones included.

    Eleventy uses camelCase for its data keys (`fileSlug`), JF2 uses
    hyphens (`post-status`).
    """
    if isinstance(value, dict):
        return {
            (camelcase(k) if isinstance(k, str) else k): camelcase_keys(v)
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [camelcase_keys(v) for v in value]
    return value

class FrontMatterDumper(yaml.SafeDumper):
    """SafeDumper that leaves date-like strings unquoted (date: 2020-02-02)."""

FrontMatterDumper.yaml_implicit_resolvers = {
    first: [(tag, rx) for tag, rx in resolvers if tag != "tag:yaml.org,2002:timestamp"]
    for first, resolvers in yaml.SafeDumper.yaml_implicit_resolvers.items()
}

def _represent_date(dumper, data):
    return dumper.represent_str(data.isoformat())

# without the timestamp resolver these would get an explicit !!timestamp tag
FrontMatterDumper.add_representer(datetime.date, _represent_date)
FrontMatterDumper.add_representer(datetime.datetime, _represent_date)

def build_front_matter_dict(properties: dict, permalink_scope: str = PERMALINK_ANY) -> dict:
    properties = camelcase_keys(properties)

    # date and title go first, everything already present keeps its value
    fm = {}
    if "published" in properties:
        fm["date"] = properties["published"]
    if properties.get("name"):
        fm["title"] = properties["name"]
    fm.update(properties)

    if fm.get("postStatus") == "draft":
        fm["draft"] = True

    for key in DROPPED_KEYS:
        fm.pop(key, None)

    url = fm.pop("url", None)
    if url:
        fm["mpUrl"] = url  # frontend edit links
        permalink = url_to_permalink(url, permalink_scope)
        if permalink:
            fm["permalink"] = permalink
    return fm

def front_matter_text(fm_dict: dict) -> str:
    yaml_txt = yaml.dump(
        fm_dict,
        Dumper=FrontMatterDumper,
        allow_unicode=True,
        sort_keys=False,
        default_flow_style=False,
        width=float("inf"),
    )
    return f"---\n{yaml_txt}---\n"
