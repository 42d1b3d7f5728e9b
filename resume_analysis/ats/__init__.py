from .runner import BASE_CHECK_COUNT, FULL_CHECK_COUNT, aggregate_checks, run_checks

__all__ = ["BASE_CHECK_COUNT", "FULL_CHECK_COUNT", "aggregate_checks", "run_checks"]
