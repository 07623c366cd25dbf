# core/loaders.py
"""
Data-loading phase of the landing page.

Everything the home template needs is fetched here and frozen into a
``HomePageData`` before rendering starts, so a failing query aborts the
request before any markup is produced.
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Tuple

from django.conf import settings
from django.db import DatabaseError
from django.utils import timezone

from barbershops.models import Barbershop

logger = logging.getLogger(__name__)

DEFAULT_BOOKING = {
    'SERVICE_NAME': 'Corte de Cabelo',
    'BARBERSHOP_NAME': 'Barbearia do João',
    'BARBERSHOP_IMAGE_URL': 'https://utfs.io/f/c97a2dc9-cf62-468b-a851-bfd2bdde775f-16p.png',
}


@dataclass(frozen=True)
class HomeRequestContext:
    """Request-scoped data handed to the loader."""
    rendered_at: datetime
    path: str = '/'
    search_query: str = ''

    @classmethod
    def from_request(cls, request) -> "HomeRequestContext":
        return cls(
            rendered_at=timezone.now(),
            path=request.path,
            search_query=request.GET.get('search', '').strip(),
        )


@dataclass(frozen=True)
class BookingSummary:
    service_name: str
    barbershop_name: str
    barbershop_image_url: str
    date: datetime


@dataclass(frozen=True)
class HomePageData:
    booking: BookingSummary
    recommended: Tuple[Barbershop, ...]
    popular: Tuple[Barbershop, ...]


def fetch_recommended() -> Tuple[Barbershop, ...]:
    """All barbershops, A to Z."""
    return tuple(Barbershop.objects.order_by('name'))


def fetch_popular() -> Tuple[Barbershop, ...]:
    """All barbershops, Z to A. There is no popularity metric yet."""
    return tuple(Barbershop.objects.order_by('-name'))


def placeholder_booking(rendered_at: datetime) -> BookingSummary:
    """Fixed booking card; keys missing from ``BOOKING_PLACEHOLDER`` keep their defaults."""
    placeholder = {**DEFAULT_BOOKING, **getattr(settings, 'BOOKING_PLACEHOLDER', {})}
    return BookingSummary(
        service_name=placeholder['SERVICE_NAME'],
        barbershop_name=placeholder['BARBERSHOP_NAME'],
        barbershop_image_url=placeholder['BARBERSHOP_IMAGE_URL'],
        date=rendered_at,
    )


def load_home_page(context: HomeRequestContext) -> HomePageData:
    try:
        recommended = fetch_recommended()
        popular = fetch_popular()
    except DatabaseError:
        logger.exception("Failed to load barbershops for %s", context.path)
        raise

    logger.debug(
        "Home page loaded: %d recommended, %d popular",
        len(recommended), len(popular),
    )

    return HomePageData(
        booking=placeholder_booking(context.rendered_at),
        recommended=recommended,
        popular=popular,
    )
