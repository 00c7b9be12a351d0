"""Prometheus metrics for document parsing."""

from prometheus_client import Counter

from wandermint.config import get_settings

trip_documents_parsed_total = Counter(
    "trip_documents_parsed_total",
    "Total trip documents parsed, by outcome",
    ["outcome"],
)

optional_structures_dropped_total = Counter(
    "optional_structures_dropped_total",
    "Optional nested structures parsed as absent after a failure",
    ["structure"],
)

list_items_skipped_total = Counter(
    "list_items_skipped_total",
    "List members skipped because they failed to parse",
    ["collection"],
)

vocabulary_fallbacks_total = Counter(
    "vocabulary_fallbacks_total",
    "Unrecognized vocabulary tags resolved to their default member",
    ["vocabulary"],
)


class PrometheusParseMetrics:
    """Prometheus-based parse metrics implementation."""

    @property
    def enabled(self) -> bool:
        return get_settings().metrics_enabled

    def inc_trip_outcome(self, outcome: str) -> None:
        """Increment the parsed-document counter for an outcome."""
        if self.enabled:
            trip_documents_parsed_total.labels(outcome=outcome).inc()

    def inc_dropped_structure(self, structure: str) -> None:
        """Increment dropped-structure counter."""
        if self.enabled:
            optional_structures_dropped_total.labels(structure=structure).inc()

    def inc_skipped_item(self, collection: str) -> None:
        """Increment skipped-item counter."""
        if self.enabled:
            list_items_skipped_total.labels(collection=collection).inc()

    def inc_vocabulary_fallback(self, vocabulary: str) -> None:
        """Increment vocabulary fallback counter."""
        if self.enabled:
            vocabulary_fallbacks_total.labels(vocabulary=vocabulary).inc()
