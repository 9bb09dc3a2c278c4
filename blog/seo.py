# blog/seo.py
"""
SEO аналізатор статей.

Чиста функція без звернень до БД: на вхід заголовок, meta-опис, HTML контент,
slug і теги, на вихід - зважений скор (0-100), результати окремих перевірок
та до п'яти підказок для редактора.
"""

import math
import re
from dataclasses import asdict, dataclass, field
from typing import Dict, Iterable, List, Optional

DEFAULT_INTERNAL_DOMAIN = 'iptv-blogg.site'

STATUS_GOOD = 'good'
STATUS_WARNING = 'warning'
STATUS_ERROR = 'error'

MAX_SUGGESTIONS = 5

STOP_WORDS = frozenset([
    'the', 'a', 'an', 'and', 'or', 'but', 'in', 'on', 'at', 'to', 'for', 'of',
    'with', 'by', 'from', 'as', 'is', 'was', 'are', 'be', 'been', 'being',
    'have', 'has', 'had', 'do', 'does', 'did', 'will', 'would', 'should',
    'could', 'may', 'might', 'must', 'can', 'how', 'what', 'when', 'where',
    'why', 'which', 'who', 'best', 'top', 'guide', 'tutorial', '2024', '2025',
])

_TAG_RE = re.compile(r'<[^>]*>')
_PARAGRAPH_SPLIT_RE = re.compile(r'\n\n+')
_SENTENCE_SPLIT_RE = re.compile(r'[.!?]+')
_NON_WORD_RE = re.compile(r'[^\w\s]')
_WORD_RE = re.compile(r'\b[a-z]+\b')
_VOWEL_GROUP_RE = re.compile(r'[aeiouy]{1,2}')
_ANCHOR_RE = re.compile(r'<a[^>]*href=["\']([^"\']*)["\'][^>]*>', re.IGNORECASE)
_IMG_RE = re.compile(r'<img[^>]*>', re.IGNORECASE)
_ALT_RE = re.compile(r'alt=["\'][^"\']+["\']', re.IGNORECASE)
_SLUG_RE = re.compile(r'^[a-z0-9-]+$')


@dataclass
class SEOCheck:
    """Результат однієї перевірки"""
    status: str = STATUS_GOOD
    value: object = ''
    message: str = ''
    score: int = 0


@dataclass
class ContentCheck(SEOCheck):
    word_count: int = 0


@dataclass
class KeywordCheck(SEOCheck):
    keyword: str = ''
    density: float = 0.0
    in_title: bool = False
    in_first_paragraph: bool = False
    in_last_paragraph: bool = False
    count: int = 0


@dataclass
class HeadingCheck(SEOCheck):
    h1_count: int = 0
    h2_count: int = 0
    h3_count: int = 0


@dataclass
class LinkCheck(SEOCheck):
    internal: int = 0
    external: int = 0


@dataclass
class ImageCheck(SEOCheck):
    total: int = 0
    with_alt: int = 0


@dataclass
class ReadabilityCheck(SEOCheck):
    grade: float = 0.0


@dataclass
class SEOAnalysis:
    """Повний результат аналізу статті"""
    score: int
    title: SEOCheck
    description: SEOCheck
    content: ContentCheck
    keyword: KeywordCheck
    headings: HeadingCheck
    links: LinkCheck
    images: ImageCheck
    slug: SEOCheck
    readability: ReadabilityCheck
    suggestions: List[str] = field(default_factory=list)

    @property
    def label(self) -> str:
        return score_label(self.score)

    def breakdown(self) -> Dict[str, Dict[str, int]]:
        """Групування балів так, як їх показує панель редактора"""
        return {
            'title': {'score': self.title.score, 'max': 15},
            'description': {'score': self.description.score, 'max': 10},
            'content': {'score': self.content.score, 'max': 20},
            'keywords': {'score': self.keyword.score, 'max': 20},
            'structure': {
                'score': self.headings.score + self.links.score + self.images.score,
                'max': 25,
            },
            'technical': {
                'score': self.slug.score + self.readability.score,
                'max': 10,
            },
        }

    def to_dict(self) -> Dict:
        data = asdict(self)
        data['label'] = self.label
        data['breakdown'] = self.breakdown()
        return data


def score_label(score: int) -> str:
    if score >= 90:
        return 'Excellent'
    if score >= 75:
        return 'Good'
    if score >= 60:
        return 'Fair'
    if score >= 40:
        return 'Poor'
    return 'Needs Work'


def strip_tags(content: str) -> str:
    return _TAG_RE.sub('', content or '')


def extract_focus_keyword(title: str, tags: Optional[Iterable[str]] = None) -> str:
    """
    Фокусне ключове слово: перші два значущі слова заголовка,
    інакше перший тег, інакше єдине значуще слово.
    """
    cleaned = _NON_WORD_RE.sub('', (title or '').lower())
    title_words = [
        word for word in cleaned.split()
        if len(word) > 2 and word not in STOP_WORDS
    ]

    if len(title_words) >= 2:
        return f'{title_words[0]} {title_words[1]}'

    tags = list(tags or [])
    if tags:
        return tags[0].lower()

    return title_words[0] if title_words else ''


def count_words(text: str) -> int:
    return len((text or '').split())


def count_keyword(content: str, keyword: str) -> int:
    """Кількість входжень ключового слова (без урахування регістру)"""
    if not keyword:
        return 0
    return (content or '').lower().count(keyword.lower())


def calculate_keyword_density(content: str, keyword: str) -> float:
    if not keyword:
        return 0.0
    total_words = count_words(content)
    if total_words == 0:
        return 0.0
    return count_keyword(content, keyword) / total_words * 100


def keyword_in_text(text: str, keyword: str) -> bool:
    if not keyword:
        return False
    return keyword.lower() in (text or '').lower()


def get_first_paragraph(content: str) -> str:
    paragraphs = _PARAGRAPH_SPLIT_RE.split(strip_tags(content))
    return paragraphs[0] if paragraphs else ''


def get_last_paragraph(content: str) -> str:
    paragraphs = [
        p for p in _PARAGRAPH_SPLIT_RE.split(strip_tags(content))
        if p.strip()
    ]
    return paragraphs[-1] if paragraphs else ''


def count_headings(content: str) -> Dict[str, int]:
    content = content or ''
    return {
        level: len(re.findall(rf'<{level}[^>]*>', content, re.IGNORECASE))
        for level in ('h1', 'h2', 'h3')
    }


def count_links(content: str, internal_domain: str = DEFAULT_INTERNAL_DOMAIN) -> Dict[str, int]:
    internal = 0
    external = 0

    for href in _ANCHOR_RE.findall(content or ''):
        if href.startswith('/') or (internal_domain and internal_domain in href):
            internal += 1
        elif href.startswith('http'):
            external += 1

    return {'internal': internal, 'external': external}


def count_images(content: str) -> Dict[str, int]:
    images = _IMG_RE.findall(content or '')
    with_alt = sum(1 for img in images if _ALT_RE.search(img))
    return {'total': len(images), 'with_alt': with_alt}


def estimate_syllables(text: str) -> int:
    """Груба оцінка складів: групи голосних, мінімум один склад на слово"""
    syllables = 0
    for word in _WORD_RE.findall((text or '').lower()):
        syllables += len(_VOWEL_GROUP_RE.findall(word)) or 1
    return syllables


def calculate_readability(content: str) -> float:
    """Flesch Reading Ease (наближено), обмежено діапазоном 0-100"""
    text = strip_tags(content)
    sentences = len([s for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()])
    words = count_words(text)

    if sentences == 0 or words == 0:
        return 0.0

    syllables = estimate_syllables(text)
    score = 206.835 - 1.015 * (words / sentences) - 84.6 * (syllables / words)
    return max(0.0, min(100.0, score))


def _check_title(title: str, suggestions: List[str]) -> SEOCheck:
    length = len(title)
    check = SEOCheck(value=length)

    if length == 0:
        check.status = STATUS_ERROR
        check.message = 'Title is required'
        suggestions.append('Add a title to your article')
    elif length < 30:
        check.status = STATUS_WARNING
        check.message = f'Title too short ({length} chars). Aim for 50-60.'
        check.score = 7
        suggestions.append('Lengthen your title to 50-60 characters')
    elif length > 60:
        check.status = STATUS_WARNING
        check.message = f'Title too long ({length} chars). Keep under 60.'
        check.score = 10
        suggestions.append('Shorten your title to under 60 characters')
    else:
        check.message = f'Title length perfect ({length} chars)'
        check.score = 15

    return check


def _check_description(description: str, suggestions: List[str]) -> SEOCheck:
    length = len(description)
    check = SEOCheck(value=length)

    if length == 0:
        check.status = STATUS_ERROR
        check.message = 'Meta description is required'
        suggestions.append('Add a meta description')
    elif length < 120:
        check.status = STATUS_WARNING
        check.message = f'Too short ({length} chars). Aim for 150-160.'
        check.score = 5
        suggestions.append(f'Add {160 - length} more characters to meta description')
    elif length > 160:
        check.status = STATUS_WARNING
        check.message = f'Too long ({length} chars). Keep under 160.'
        check.score = 7
        suggestions.append('Shorten meta description to under 160 characters')
    else:
        check.message = f'Perfect length ({length} chars)'
        check.score = 10

    return check


def _check_content(word_count: int, suggestions: List[str]) -> ContentCheck:
    check = ContentCheck(value=word_count, word_count=word_count)

    if word_count == 0:
        check.status = STATUS_ERROR
        check.message = 'Content is empty'
        suggestions.append('Write your article content')
    elif word_count < 300:
        check.status = STATUS_ERROR
        check.message = f'Too short ({word_count} words). Minimum 1500 words.'
        check.score = 5
        suggestions.append(f'Add {1500 - word_count} more words to reach minimum')
    elif word_count < 1000:
        check.status = STATUS_WARNING
        check.message = f'Short ({word_count} words). Aim for 1500+.'
        check.score = 10
        suggestions.append(f'Add {1500 - word_count} more words for better SEO')
    elif word_count < 1500:
        check.status = STATUS_WARNING
        check.message = f'Good ({word_count} words). Aim for 1500+.'
        check.score = 15
        suggestions.append(f'Add {1500 - word_count} more words to reach target')
    else:
        check.message = f'Excellent ({word_count} words)'
        check.score = 20

    return check


def _check_keyword(title: str, content: str, keyword: str, word_count: int,
                   suggestions: List[str]) -> KeywordCheck:
    density = calculate_keyword_density(content, keyword)
    count = count_keyword(content, keyword)

    check = KeywordCheck(
        value=f'{density:.2f}',
        keyword=keyword,
        density=density,
        in_title=keyword_in_text(title, keyword),
        in_first_paragraph=keyword_in_text(get_first_paragraph(content), keyword),
        in_last_paragraph=keyword_in_text(get_last_paragraph(content), keyword),
        count=count,
    )

    score = 0
    if check.in_title:
        score += 5
    else:
        suggestions.append(f'Add "{keyword}" to your title')

    if check.in_first_paragraph:
        score += 5
    else:
        suggestions.append(f'Add "{keyword}" to first paragraph')

    if check.in_last_paragraph:
        score += 3
    else:
        suggestions.append(f'Add "{keyword}" to last paragraph')

    if 0.5 <= density <= 2.5:
        score += 7
        check.message = f'Keyword density perfect ({density:.1f}%)'
    elif density < 0.5:
        score += 3
        check.status = STATUS_WARNING
        check.message = f'Keyword density low ({density:.1f}%). Use "{keyword}" more.'
        missing = max(1, math.ceil(0.01 * word_count - count))
        suggestions.append(f'Use "{keyword}" {missing} more times')
    else:
        score += 3
        check.status = STATUS_WARNING
        check.message = f'Keyword density high ({density:.1f}%). Reduce usage.'
        suggestions.append('Reduce keyword usage to avoid keyword stuffing')

    check.score = score
    return check


def _check_headings(content: str, suggestions: List[str]) -> HeadingCheck:
    headings = count_headings(content)
    check = HeadingCheck(
        value=f"H1:{headings['h1']} H2:{headings['h2']} H3:{headings['h3']}",
        h1_count=headings['h1'],
        h2_count=headings['h2'],
        h3_count=headings['h3'],
    )

    if check.h1_count == 0:
        check.status = STATUS_ERROR
        check.message = 'No H1 heading found'
        suggestions.append('Add one H1 heading')
    elif check.h1_count > 1:
        check.status = STATUS_WARNING
        check.message = f'Multiple H1 headings ({check.h1_count}). Use only one.'
        check.score = 5
        suggestions.append('Use only one H1 heading per article')
    elif check.h2_count < 2:
        check.status = STATUS_WARNING
        check.message = 'Add more H2 headings for structure'
        check.score = 7
        suggestions.append('Add at least 3-5 H2 headings')
    else:
        check.message = 'Good heading structure'
        check.score = 10

    return check


def _check_links(content: str, internal_domain: str, suggestions: List[str]) -> LinkCheck:
    links = count_links(content, internal_domain)
    internal, external = links['internal'], links['external']
    check = LinkCheck(
        value=f'Internal:{internal} External:{external}',
        internal=internal,
        external=external,
    )

    score = 0
    if 3 <= internal <= 7:
        score += 6
    elif internal < 3:
        check.status = STATUS_WARNING
        suggestions.append(f'Add {3 - internal} more internal links')
        score += 3
    else:
        score += 5

    if 2 <= external <= 5:
        score += 4
    elif external < 2:
        check.status = STATUS_WARNING
        suggestions.append(f'Add {2 - external} more external links')
        score += 2
    else:
        score += 3

    check.score = score
    check.message = 'Good link structure' if check.status == STATUS_GOOD else 'Improve link structure'
    return check


def _check_images(content: str, suggestions: List[str]) -> ImageCheck:
    images = count_images(content)
    total, with_alt = images['total'], images['with_alt']
    check = ImageCheck(
        value=f'{total} images, {with_alt} with alt',
        total=total,
        with_alt=with_alt,
    )

    if total == 0:
        check.status = STATUS_WARNING
        check.message = 'No images found. Add images to improve engagement.'
        check.score = 2
        suggestions.append('Add at least 3-5 images to your article')
    elif with_alt < total:
        check.status = STATUS_WARNING
        check.message = f'{total - with_alt} images missing alt text'
        check.score = 3
        suggestions.append(f'Add alt text to {total - with_alt} images')
    else:
        check.message = 'All images have alt text'
        check.score = 5

    return check


def _check_slug(slug: str, suggestions: List[str]) -> SEOCheck:
    check = SEOCheck(value=slug)

    if not slug:
        check.status = STATUS_ERROR
        check.message = 'URL slug is required'
        suggestions.append('Add a URL slug')
    elif len(slug) > 60:
        check.status = STATUS_WARNING
        check.message = 'Slug too long. Keep under 60 characters.'
        check.score = 3
        suggestions.append('Shorten URL slug')
    elif not _SLUG_RE.match(slug):
        check.status = STATUS_WARNING
        check.message = 'Use only lowercase letters, numbers, and hyphens'
        check.score = 3
        suggestions.append('Fix URL slug format')
    else:
        check.message = 'Good URL slug'
        check.score = 5

    return check


def _check_readability(content: str, suggestions: List[str]) -> ReadabilityCheck:
    readability = calculate_readability(content)
    check = ReadabilityCheck(value=f'{readability:.0f}', grade=readability)

    if readability >= 60:
        check.message = 'Easy to read'
        check.score = 5
    elif readability >= 30:
        check.status = STATUS_WARNING
        check.message = 'Fairly difficult to read'
        check.score = 3
        suggestions.append('Simplify sentences for better readability')
    else:
        check.status = STATUS_WARNING
        check.message = 'Difficult to read'
        check.score = 2
        suggestions.append('Use shorter sentences and simpler words')

    return check


def analyze_seo(title: str,
                description: str,
                content: str,
                slug: str,
                tags: Optional[Iterable[str]] = None,
                internal_domain: str = DEFAULT_INTERNAL_DOMAIN) -> SEOAnalysis:
    """
    Повний SEO аналіз статті.

    Args:
        title: Заголовок (або SEO заголовок)
        description: Meta опис
        content: HTML контент статті
        slug: URL slug
        tags: Назви тегів (фолбек для фокусного ключового слова)
        internal_domain: Домен, посилання на який вважаються внутрішніми

    Returns:
        SEOAnalysis зі скором 0-100 і максимум п'ятьма підказками
    """
    title = title or ''
    description = description or ''
    content = content or ''
    slug = slug or ''

    focus_keyword = extract_focus_keyword(title, tags)
    word_count = count_words(content)
    suggestions: List[str] = []

    title_check = _check_title(title, suggestions)
    description_check = _check_description(description, suggestions)
    content_check = _check_content(word_count, suggestions)
    keyword_check = _check_keyword(title, content, focus_keyword, word_count, suggestions)
    heading_check = _check_headings(content, suggestions)
    link_check = _check_links(content, internal_domain, suggestions)
    image_check = _check_images(content, suggestions)
    slug_check = _check_slug(slug, suggestions)
    readability_check = _check_readability(content, suggestions)

    total = sum(check.score for check in (
        title_check, description_check, content_check, keyword_check,
        heading_check, link_check, image_check, slug_check, readability_check,
    ))

    return SEOAnalysis(
        score=round(total),
        title=title_check,
        description=description_check,
        content=content_check,
        keyword=keyword_check,
        headings=heading_check,
        links=link_check,
        images=image_check,
        slug=slug_check,
        readability=readability_check,
        suggestions=suggestions[:MAX_SUGGESTIONS],
    )
