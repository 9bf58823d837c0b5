from recipe_kit.observability import names
from recipe_kit.observability.base import InMemoryMetricsHook, NoOpMetricsHook


class TestNoOpMetricsHook:
    def test_accepts_everything(self) -> None:
        hook = NoOpMetricsHook()

        hook.record_latency(names.PARSE_DURATION, 1.5, labels={"a": "b"})
        hook.increment(names.PARSE_SECTIONS_TOTAL)
        hook.record_gauge(names.GENERATION_LAST_COST, 0.01)


class TestInMemoryMetricsHook:
    def test_collects_observations(self) -> None:
        hook = InMemoryMetricsHook()

        hook.record_latency(names.PARSE_DURATION, 1.5)
        hook.record_latency(names.PARSE_DURATION, 2.5)
        hook.increment(names.PARSE_SECTIONS_TOTAL)
        hook.increment(names.PARSE_SECTIONS_TOTAL, 4, labels={"tier": "basic"})
        hook.record_gauge(names.GENERATION_LAST_COST, 0.01)
        hook.record_gauge(names.GENERATION_LAST_COST, 0.02)

        assert hook.latencies[names.PARSE_DURATION] == [1.5, 2.5]
        assert hook.counters[names.PARSE_SECTIONS_TOTAL] == 5
        assert hook.gauges[names.GENERATION_LAST_COST] == 0.02

    def test_unknown_counter_reads_zero(self) -> None:
        assert InMemoryMetricsHook().counters["never_incremented"] == 0
