"""Shared dataclasses used across the segmenters, export and search modules.

No imports from other lc214 modules, which keeps this safe as a foundation
that any module can import without risk of circular dependencies.

Attribute names are English; the JSON keys written by ``to_dict`` keep the
Portuguese field names the browsing UI reads.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ArticleCandidate:
    """An accepted "Art. N" marker found in the source text."""

    start: int
    """Offset of the marker in the source text."""

    number: int
    """Parsed article number."""

    marker: str
    """Matched marker text, e.g. ``"Art. 7º "``."""


@dataclass(frozen=True, slots=True)
class Article:
    """A single numbered article of the statute."""

    number: int
    label: str
    body: str
    paragraphs: tuple[str, ...] | None = None
    """Paragraph clauses ("§ 1º ...", "Parágrafo único ..."), when requested."""

    items: tuple[str, ...] | None = None
    """Inciso lines ("I - ...", "II – ..."), when requested."""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "numero": self.number,
            "titulo": self.label,
            "conteudo": self.body,
            "textoCompleto": self.body,
        }
        if self.paragraphs is not None:
            data["paragrafos"] = list(self.paragraphs)
        if self.items is not None:
            data["incisos"] = list(self.items)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Article:
        paragraphs = data.get("paragrafos")
        items = data.get("incisos")
        return cls(
            number=int(data["numero"]),
            label=data["titulo"],
            body=data["conteudo"],
            paragraphs=tuple(paragraphs) if paragraphs is not None else None,
            items=tuple(items) if items is not None else None,
        )


@dataclass(frozen=True, slots=True)
class Annex:
    """An annex of the statute, sliced from the HTML rendering."""

    id: str
    label: str
    subtitle: str
    body_html: str
    body_text: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "titulo": self.label,
            "subtitulo": self.subtitle,
            "conteudoTexto": self.body_text,
            "conteudoHtml": self.body_html,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Annex:
        return cls(
            id=data["id"],
            label=data["titulo"],
            subtitle=data.get("subtitulo", ""),
            body_html=data.get("conteudoHtml", ""),
            body_text=data.get("conteudoTexto", ""),
        )


@dataclass(frozen=True, slots=True)
class DocumentBundle:
    """Everything extracted from the statute text in one run."""

    title: str
    preamble: str
    articles: tuple[Article, ...] = ()
    full_text: str = ""

    @property
    def total(self) -> int:
        return len(self.articles)

    def to_dict(self) -> dict[str, Any]:
        return {
            "titulo": self.title,
            "ementa": self.preamble,
            "artigos": [article.to_dict() for article in self.articles],
            "textoCompleto": self.full_text,
            "totalArtigos": self.total,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DocumentBundle:
        return cls(
            title=data["titulo"],
            preamble=data.get("ementa", ""),
            articles=tuple(Article.from_dict(item) for item in data.get("artigos", [])),
            full_text=data.get("textoCompleto", ""),
        )


@dataclass(frozen=True, slots=True)
class SearchHit:
    """One row of a search result: either an article or an annex."""

    kind: str
    """``"artigo"`` or ``"anexo"``."""

    number: int
    """Article number, or -1 for annexes."""

    title: str
    excerpt: str
    body: str
    """Article text, or annex HTML."""

    annex_id: str | None = None

    @property
    def is_annex(self) -> bool:
        return self.kind == "anexo"
