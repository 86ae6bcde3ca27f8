"""Coach notes parsing: deterministic engine plus AI-first service."""

import logging
from dataclasses import dataclass, field
from datetime import datetime

from macrotrack.domain.coach_notes import ParsedResult
from macrotrack.services.catalog import DEFAULT_CATALOG, FoodCatalog
from macrotrack.services.dates import resolve_date
from macrotrack.services.extraction import ExtractionService
from macrotrack.services.foods import extract_foods
from macrotrack.services.water import extract_water
from macrotrack.services.workouts import extract_workouts

_logger = logging.getLogger(__name__)


def parse_coach_notes(
    text: str,
    now: datetime | None = None,
    catalog: FoodCatalog = DEFAULT_CATALOG,
) -> ParsedResult:
    """Parse an utterance into foods, water and workouts without network access."""
    normalized = text.lower()
    return ParsedResult(
        date=resolve_date(normalized, now),
        foods=extract_foods(normalized, catalog),
        water=extract_water(normalized),
        workouts=extract_workouts(normalized),
        raw_text=text,
    )


@dataclass
class CoachNotesService:
    """Service that prefers AI extraction and falls back to pattern matching."""

    catalog: FoodCatalog = field(default_factory=lambda: DEFAULT_CATALOG)
    extraction_service: ExtractionService | None = None

    def parse(self, text: str, now: datetime | None = None) -> ParsedResult:
        """Parse with the deterministic engine."""
        return parse_coach_notes(text, now, self.catalog)

    async def parse_with_ai(
        self, text: str, now: datetime | None = None
    ) -> ParsedResult:
        """Parse with AI extraction, falling back on any failure."""
        if self.extraction_service is None:
            return self.parse(text, now)
        try:
            return await self.extraction_service.extract(text, now)
        except Exception as exc:
            _logger.warning(
                "AI parsing failed, falling back to pattern matching: %s", exc
            )
            return self.parse(text, now)
