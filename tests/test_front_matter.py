import datetime

import pytest

from publisher.front_matter import build_front_matter_dict, camelcase, camelcase_keys, front_matter_text


@pytest.mark.parametrize("key, expected", [
    ("post-status", "postStatus"),
    ("post_status", "postStatus"),
    ("postStatus", "postStatus"),
    ("mp-syndicate-to", "mpSyndicateTo"),
    ("Name", "name"),
    ("FOO-BAR", "fooBar"),
    ("url", "url"),
    ("-", "-"),
])
def test_camelcase(key, expected):
    assert camelcase(key) == expected


def test_camelcase_keys_walks_lists_and_dicts():
    src = {"in-reply-to": [{"author-name": "A"}], 1: {"like-of": "x"}}
    out = camelcase_keys(src)

    assert out == {"inReplyTo": [{"authorName": "A"}], 1: {"likeOf": "x"}}
    assert src == {"in-reply-to": [{"author-name": "A"}], 1: {"like-of": "x"}}


def test_date_and_title_lead_the_mapping():
    fm = build_front_matter_dict({"category": ["a"], "name": "T", "published": "2020-02-02"})
    assert list(fm) == ["date", "title", "category"]


def test_mp_url_and_permalink_come_last():
    fm = build_front_matter_dict({"url": "https://example.com/about", "name": "About", "location": "Home"})
    assert list(fm) == ["title", "location", "mpUrl", "permalink"]
    assert fm["permalink"] == "/about/"


def test_empty_name_is_not_a_title():
    fm = build_front_matter_dict({"name": "", "published": "2020-02-02"})
    assert fm == {"date": "2020-02-02"}


def test_front_matter_text_delimiters():
    assert front_matter_text({"title": "Lunchtime"}) == "---\ntitle: Lunchtime\n---\n"


def test_date_strings_stay_unquoted():
    text = front_matter_text({"date": "2020-02-02", "updated": "2022-12-11T10:00:00+01:00"})
    assert text == "---\ndate: 2020-02-02\nupdated: 2022-12-11T10:00:00+01:00\n---\n"


def test_date_objects_serialize_as_iso_strings():
    text = front_matter_text({
        "date": datetime.date(2020, 2, 2),
        "updated": datetime.datetime(2022, 12, 11, 10, 30),
    })
    assert text == "---\ndate: 2020-02-02\nupdated: 2022-12-11T10:30:00\n---\n"


def test_unicode_is_kept():
    assert "title: Café\n" in front_matter_text({"title": "Café"})
