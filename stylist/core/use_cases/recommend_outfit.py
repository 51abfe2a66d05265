# Recommend Outfit Use Case
"""
Two-tier outfit recommendation.

The pipeline is TryExternal -> OnFailure -> LocalHeuristic:
1. Ask the external suggestion source once (if one is configured)
2. Accept its answer only if the suggested id is in the catalog
3. Otherwise run the local heuristic on the same inputs

The external tier's result is an explicit ExternalAttempt, so every
fallback has a named outcome. Results are never blended: a suggestion
comes entirely from one tier.
"""
import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from stylist.core.styling import recommend_locally
from stylist.domain.entities.product import CartItem, Product
from stylist.domain.entities.suggestion import Suggestion, SuggestionSource
from stylist.domain.interfaces.suggestion_source_interface import (
    SuggestionRequest,
    SuggestionSourceInterface,
)
from stylist.utils.exceptions import EmptyCatalogError, SuggestionSourceError
from stylist.utils.logger import get_logger, log_exception, log_execution_time

logger = get_logger(__name__)


class ExternalOutcome(Enum):
    """Outcome of the single external attempt."""

    ACCEPTED = "accepted"
    NOT_CONFIGURED = "not_configured"
    FAILED = "failed"
    UNKNOWN_PRODUCT = "unknown_product"


@dataclass(frozen=True)
class ExternalAttempt:
    """Result of asking the external suggestion source."""
    outcome: ExternalOutcome
    suggestion: Optional[Suggestion] = None
    detail: str = ""

    @property
    def accepted(self) -> bool:
        return self.outcome is ExternalOutcome.ACCEPTED and self.suggestion is not None


class OutfitRecommender:
    """
    Recommender combining an optional external source with the local heuristic.

    Stateless apart from its collaborators: concurrent calls share nothing,
    and each call receives its own catalog and cart snapshot.
    """

    def __init__(
        self,
        source: Optional[SuggestionSourceInterface] = None,
        timeout_seconds: Optional[float] = None,
    ):
        """
        Initialize the recommender.

        Args:
            source: External suggestion source, or None for heuristic only.
            timeout_seconds: Upper bound for the external attempt. The
                source may apply its own, shorter timeout.
        """
        self.source = source
        self.timeout_seconds = timeout_seconds

    async def try_external(
        self,
        current_product: Product,
        cart_items: Sequence[CartItem],
        catalog: Sequence[Product],
    ) -> ExternalAttempt:
        """
        Make the single external attempt and validate it against the catalog.

        Returns:
            ExternalAttempt; only ACCEPTED carries a suggestion.
        """
        if self.source is None:
            return ExternalAttempt(ExternalOutcome.NOT_CONFIGURED)

        request = SuggestionRequest(
            current_product=current_product,
            cart_items=tuple(cart_items),
            catalog=tuple(catalog),
        )

        try:
            with log_execution_time(logger, f"external suggestion ({self.source.name})"):
                if self.timeout_seconds is not None:
                    external = await asyncio.wait_for(
                        self.source.suggest(request), timeout=self.timeout_seconds
                    )
                else:
                    external = await self.source.suggest(request)
        except SuggestionSourceError as e:
            return ExternalAttempt(ExternalOutcome.FAILED, detail=str(e))
        except asyncio.TimeoutError:
            return ExternalAttempt(
                ExternalOutcome.FAILED,
                detail=f"no answer within {self.timeout_seconds}s",
            )
        except Exception as e:
            log_exception(logger, f"external suggestion ({self.source.name})", e)
            return ExternalAttempt(ExternalOutcome.FAILED, detail=f"{type(e).__name__}: {e}")

        product = next(
            (p for p in catalog if p.id == external.suggested_product_id), None
        )
        if product is None:
            return ExternalAttempt(
                ExternalOutcome.UNKNOWN_PRODUCT,
                detail=f"suggested id {external.suggested_product_id!r} is not in the catalog",
            )

        return ExternalAttempt(
            ExternalOutcome.ACCEPTED,
            suggestion=Suggestion(
                suggested_product_id=product.id,
                product=product,
                reason=external.reason,
                style_tags=list(external.style_tags),
                source=SuggestionSource.EXTERNAL,
            ),
        )

    async def recommend_with_attempt(
        self,
        current_product: Product,
        cart_items: Sequence[CartItem],
        catalog: Sequence[Product],
    ) -> Tuple[Suggestion, ExternalAttempt]:
        """
        Recommend one product and report what the external tier did.

        Raises:
            EmptyCatalogError: If the catalog has no products.
        """
        if not catalog:
            raise EmptyCatalogError()

        attempt = await self.try_external(current_product, cart_items, catalog)
        if attempt.accepted:
            logger.info(f"Using external suggestion {attempt.suggestion.suggested_product_id}")
            return attempt.suggestion, attempt

        if attempt.outcome is not ExternalOutcome.NOT_CONFIGURED:
            logger.warning(
                f"External suggestion discarded ({attempt.outcome.value}): {attempt.detail}. "
                f"Falling back to local heuristic"
            )

        suggestion = recommend_locally(current_product, cart_items, catalog)
        logger.info(f"Using heuristic suggestion {suggestion.suggested_product_id}")
        return suggestion, attempt

    async def recommend(
        self,
        current_product: Product,
        cart_items: Sequence[CartItem],
        catalog: Sequence[Product],
    ) -> Suggestion:
        """
        Recommend one complementary product.

        Args:
            current_product: Product being viewed.
            cart_items: Cart snapshot.
            catalog: Products in catalog order.

        Returns:
            The suggestion, from the external tier or the heuristic.

        Raises:
            EmptyCatalogError: If the catalog has no products.
        """
        suggestion, _ = await self.recommend_with_attempt(current_product, cart_items, catalog)
        return suggestion


def recommend(
    current_product: Product,
    cart_items: Sequence[CartItem],
    catalog: Sequence[Product],
    source: Optional[SuggestionSourceInterface] = None,
) -> Suggestion:
    """
    Synchronous entry point.

    Without a source this is the pure local heuristic. With a source it
    runs the two-tier pipeline in a fresh event loop, so it must not be
    called from inside a running loop; await OutfitRecommender.recommend
    there instead.

    Raises:
        EmptyCatalogError: If the catalog has no products.
    """
    if source is None:
        return recommend_locally(current_product, cart_items, catalog)

    return asyncio.run(OutfitRecommender(source).recommend(current_product, cart_items, catalog))
