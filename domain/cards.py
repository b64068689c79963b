# -*- coding: utf-8 -*-
"""Catalog rendering as a pure function of (dataset, filters, labels).

The output is a view model; turning it into markup is the rendering
port's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from core.types import MessageKind
from domain.catalog_filter import filter_projects
from domain.labels import CatalogLabels
from domain.models.project import Project, is_present

ANIMATION_STEP_S = 0.1


@dataclass(frozen=True)
class CardLink:
    kind: str
    href: str
    label: str
    aria_label: str


@dataclass(eq=False)
class LazyImage:
    """One deferred image. Identity matters: a new render makes new handles."""

    card_index: int
    src: str
    alt: str
    loaded: bool = False


@dataclass(frozen=True)
class ProjectCard:
    index: int
    title: str
    description: str
    tech_text: str
    category_text: str
    mode_text: str
    captions: Mapping[str, str]
    image: Optional[LazyImage] = None
    contribution: Optional[str] = None
    links: Tuple[CardLink, ...] = ()

    @property
    def animation_delay(self) -> float:
        return round(self.index * ANIMATION_STEP_S, 3)


@dataclass(frozen=True)
class CatalogView:
    cards: Tuple[ProjectCard, ...]
    empty_kind: Optional[MessageKind] = None

    @property
    def is_empty(self) -> bool:
        return not self.cards


def _links(project: Project, labels: CatalogLabels) -> Tuple[CardLink, ...]:
    links: List[CardLink] = []
    for kind, icon in (("site", "🌐"), ("demo", "🎬"), ("code", "💻")):
        href = getattr(project, kind)
        if is_present(href):
            links.append(CardLink(
                kind=kind,
                href=href,
                label=f"{icon} {labels.caption(kind)}",
                aria_label=labels.caption(f"{kind}_aria"),
            ))
    return tuple(links)


def build_card(project: Project, index: int, labels: CatalogLabels) -> ProjectCard:
    image = LazyImage(card_index=index, src=project.media, alt=project.title) if project.has_image else None
    return ProjectCard(
        index=index,
        title=project.title,
        description=project.description,
        tech_text=", ".join(project.tech),
        category_text=labels.category(project.category),
        mode_text=labels.mode(project.mode),
        captions={k: labels.caption(k) for k in ("contribution", "technologies", "category", "mode")},
        image=image,
        contribution=project.contribution if project.has_contribution else None,
        links=_links(project, labels),
    )


def build_cards(projects: Iterable[Project], labels: CatalogLabels) -> List[ProjectCard]:
    return [build_card(p, i, labels) for i, p in enumerate(projects)]


def catalog_view(projects: Iterable[Project], labels: CatalogLabels) -> CatalogView:
    cards = tuple(build_cards(projects, labels))
    return CatalogView(cards=cards, empty_kind=None if cards else MessageKind.NO_PROJECTS)


def render_catalog(
    dataset: Sequence[Project],
    filters: Mapping[str, Optional[str]],
    labels: CatalogLabels,
) -> CatalogView:
    return catalog_view(filter_projects(dataset, filters), labels)
