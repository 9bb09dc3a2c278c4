"""
Тести SEO аналізатора (чисті функції, без БД)
"""
import pytest

from blog import seo
from blog.seo import (
    analyze_seo,
    calculate_keyword_density,
    calculate_readability,
    count_headings,
    count_images,
    count_keyword,
    count_links,
    count_words,
    extract_focus_keyword,
    get_first_paragraph,
    get_last_paragraph,
    score_label,
)


# === Хелпери ===

def test_focus_keyword_uses_first_two_meaningful_title_words():
    assert extract_focus_keyword("Best IPTV Players for Firestick") == "iptv players"


def test_focus_keyword_falls_back_to_first_tag():
    assert extract_focus_keyword("The IPTV", ["Streaming", "Apps"]) == "streaming"


def test_focus_keyword_single_word_and_empty():
    assert extract_focus_keyword("IPTV") == "iptv"
    assert extract_focus_keyword("") == ""
    assert extract_focus_keyword("How to do it") == ""


def test_focus_keyword_strips_punctuation():
    assert extract_focus_keyword("Kodi: Setup, Tips!") == "kodi setup"


def test_count_words_ignores_extra_whitespace():
    assert count_words("  one two\n\nthree  ") == 3
    assert count_words("") == 0


def test_count_keyword_is_case_insensitive_literal():
    assert count_keyword("IPTV iptv Iptv", "iptv") == 3
    assert count_keyword("a.b a+b", "a+b") == 1


def test_count_keyword_empty_keyword_is_zero():
    assert count_keyword("anything at all", "") == 0
    assert calculate_keyword_density("anything at all", "") == 0.0


def test_keyword_density_percentage():
    assert calculate_keyword_density("iptv is great iptv", "iptv") == pytest.approx(50.0)
    assert calculate_keyword_density("", "iptv") == 0.0


def test_first_and_last_paragraph():
    content = "<p>First part</p>\n\n<p>Middle</p>\n\n<p>Last part</p>\n\n"
    assert get_first_paragraph(content) == "First part"
    assert get_last_paragraph(content) == "Last part"
    assert get_last_paragraph("") == ""


def test_count_headings_by_level():
    content = "<h1>A</h1><h2 class='x'>B</h2><H2>C</H2><h3>D</h3>"
    assert count_headings(content) == {"h1": 1, "h2": 2, "h3": 1}


def test_count_links_internal_and_external():
    content = (
        '<a href="/category/guides/">rel</a>'
        '<a href="https://iptv-blogg.site/article/x/">abs</a>'
        '<a href="https://kodi.tv">ext</a>'
        '<a href="mailto:hi@example.com">mail</a>'
    )
    assert count_links(content, "iptv-blogg.site") == {"internal": 2, "external": 1}


def test_count_links_custom_internal_domain():
    content = '<a href="https://example.org/a">x</a>'
    assert count_links(content, "example.org") == {"internal": 1, "external": 0}
    assert count_links(content, "iptv-blogg.site") == {"internal": 0, "external": 1}


def test_count_images_with_alt():
    content = '<img src="a.jpg" alt="Player"><img src="b.jpg" alt=""><IMG src="c.jpg">'
    assert count_images(content) == {"total": 3, "with_alt": 1}


def test_readability_bounds():
    assert calculate_readability("") == 0.0
    easy = "The cat sat. The dog ran. We had fun."
    assert 60 <= calculate_readability(easy) <= 100


def test_readability_is_clamped():
    assert calculate_readability("Go. Go. Go.") == 100.0
    assert calculate_readability("internationalization " * 10) == 0.0


@pytest.mark.parametrize("readability,status,points,suggestion", [
    (85, seo.STATUS_GOOD, 5, None),
    (60, seo.STATUS_GOOD, 5, None),
    (59.9, seo.STATUS_WARNING, 3, "Simplify sentences for better readability"),
    (30, seo.STATUS_WARNING, 3, "Simplify sentences for better readability"),
    (29.9, seo.STATUS_WARNING, 2, "Use shorter sentences and simpler words"),
    (0, seo.STATUS_WARNING, 2, "Use shorter sentences and simpler words"),
])
def test_readability_tiers(monkeypatch, readability, status, points, suggestion):
    monkeypatch.setattr(seo, "calculate_readability", lambda content: readability)
    suggestions = []
    check = seo._check_readability("<p>text</p>", suggestions)
    assert check.status == status
    assert check.score == points
    assert check.grade == readability
    assert suggestions == ([suggestion] if suggestion else [])


@pytest.mark.parametrize("score,label", [
    (100, "Excellent"), (90, "Excellent"), (89, "Good"), (75, "Good"),
    (74, "Fair"), (60, "Fair"), (59, "Poor"), (40, "Poor"), (39, "Needs Work"), (0, "Needs Work"),
])
def test_score_label_thresholds(score, label):
    assert score_label(score) == label


# === Окремі перевірки ===

@pytest.mark.parametrize("length,score,status", [
    (0, 0, "error"), (20, 7, "warning"), (45, 15, "good"), (60, 15, "good"), (70, 10, "warning"),
])
def test_title_check_thresholds(length, score, status):
    check = seo._check_title("x" * length, [])
    assert check.score == score
    assert check.status == status


@pytest.mark.parametrize("length,score", [(0, 0), (100, 5), (150, 10), (160, 10), (170, 7)])
def test_description_check_thresholds(length, score):
    assert seo._check_description("d" * length, []).score == score


def test_description_suggests_missing_characters():
    suggestions = []
    seo._check_description("d" * 100, suggestions)
    assert suggestions == ["Add 60 more characters to meta description"]


@pytest.mark.parametrize("words,score", [(0, 0), (250, 5), (800, 10), (1200, 15), (1500, 20)])
def test_content_check_thresholds(words, score):
    assert seo._check_content(words, []).score == score


def test_content_check_suggestion_counts_missing_words():
    suggestions = []
    seo._check_content(800, suggestions)
    assert suggestions == ["Add 700 more words for better SEO"]


def test_keyword_check_perfect_placement():
    content = "iptv players first.\n\n" + "filler " * 96 + "\n\niptv players last."
    check = seo._check_keyword("IPTV players guide", content, "iptv players", count_words(content), [])
    assert check.in_title and check.in_first_paragraph and check.in_last_paragraph
    assert check.count == 2
    assert 0.5 <= check.density <= 2.5
    assert check.score == 20


def test_keyword_check_low_density_suggests_more_uses():
    content = "word " * 200
    suggestions = []
    check = seo._check_keyword("Nothing here", content, "iptv players", 200, suggestions)
    assert check.status == "warning"
    assert check.score == 3
    assert 'Use "iptv players" 2 more times' in suggestions


def test_keyword_check_low_density_asks_for_at_least_one_more():
    suggestions = []
    seo._check_keyword("x", "iptv " + "word " * 300, "iptv", 301, suggestions)
    assert 'Use "iptv" 3 more times' in suggestions

    suggestions = []
    seo._check_keyword("x", "", "iptv", 0, suggestions)
    assert 'Use "iptv" 1 more times' in suggestions


def test_keyword_check_high_density():
    suggestions = []
    check = seo._check_keyword("iptv", "iptv iptv iptv word", "iptv", 4, suggestions)
    assert check.message.startswith("Keyword density high")
    assert "Reduce keyword usage to avoid keyword stuffing" in suggestions


@pytest.mark.parametrize("content,score", [
    ("<p>none</p>", 0),
    ("<h1>a</h1><h1>b</h1>", 5),
    ("<h1>a</h1><h2>b</h2>", 7),
    ("<h1>a</h1><h2>b</h2><h2>c</h2>", 10),
])
def test_heading_check_scores(content, score):
    assert seo._check_headings(content, []).score == score


def test_link_check_scores():
    good = ('<a href="/a">1</a><a href="/b">2</a><a href="/c">3</a>'
            '<a href="https://x.com">4</a><a href="https://y.com">5</a>')
    assert seo._check_links(good, "iptv-blogg.site", []).score == 10

    suggestions = []
    check = seo._check_links("", "iptv-blogg.site", suggestions)
    assert check.score == 5
    assert suggestions == ["Add 3 more internal links", "Add 2 more external links"]


@pytest.mark.parametrize("content,score", [
    ("", 2),
    ('<img src="a"><img src="b" alt="b">', 3),
    ('<img src="a" alt="a">', 5),
])
def test_image_check_scores(content, score):
    assert seo._check_images(content, []).score == score


@pytest.mark.parametrize("slug,score", [
    ("", 0), ("s" * 61, 3), ("Bad_Slug", 3), ("good-slug-2025", 5),
])
def test_slug_check_scores(slug, score):
    assert seo._check_slug(slug, []).score == score


# === analyze_seo ===

def test_empty_article_scores_low_and_caps_suggestions():
    result = analyze_seo("", "", "", "")
    # keyword 3 + links 5 + images 2 + readability 2
    assert result.score == 12
    assert result.label == "Needs Work"
    assert len(result.suggestions) == seo.MAX_SUGGESTIONS
    assert result.suggestions[:3] == [
        "Add a title to your article",
        "Add a meta description",
        "Write your article content",
    ]


def test_score_is_sum_of_checks_and_within_bounds():
    content = (
        "<h1>IPTV Players</h1><p>IPTV players let you stream TV. They are easy to use.</p>\n\n"
        "<h2>Setup</h2><p>Open the app. Add a list.</p>\n\n"
        "<h2>Tips</h2><p>Pick good IPTV players for you.</p>"
        '<a href="/a">a</a><a href="/b">b</a><a href="/c">c</a>'
        '<a href="https://kodi.tv">k</a><a href="https://tivimate.com">t</a>'
        '<img src="x.jpg" alt="IPTV players">'
    )
    result = analyze_seo(
        "IPTV Players Compared: Setup Tips and Recommendations",
        "d" * 155,
        content,
        "iptv-players-compared",
    )
    checks = [result.title, result.description, result.content, result.keyword, result.headings,
              result.links, result.images, result.slug, result.readability]
    assert result.score == sum(c.score for c in checks)
    assert 0 <= result.score <= 100
    assert result.keyword.keyword == "iptv players"
    assert result.headings.score == 10
    assert result.links.score == 10
    assert result.images.score == 5


def test_breakdown_maxima_total_100():
    result = analyze_seo("t", "d", "c", "s")
    breakdown = result.breakdown()
    assert set(breakdown) == {"title", "description", "content", "keywords", "structure", "technical"}
    assert sum(part["max"] for part in breakdown.values()) == 100
    assert sum(part["score"] for part in breakdown.values()) == result.score


def test_to_dict_is_json_ready():
    data = analyze_seo("IPTV Guide", "desc", "<p>text</p>", "iptv-guide", tags=["IPTV"]).to_dict()
    assert data["label"] == score_label(data["score"])
    assert data["keyword"]["keyword"] == "iptv"
    assert {"score", "suggestions", "breakdown", "title", "readability"} <= set(data)
