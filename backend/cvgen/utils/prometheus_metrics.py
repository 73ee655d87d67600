"""
Prometheus Metrics for CV and Cover Letter Generation

Metrics Categories:
- Submission metrics: form submissions by outcome
- Provider metrics: per-slot call counts and latency
- Error metrics: validation failures, provider errors by type
"""

import logging
from functools import wraps
from time import time
from typing import Any, Callable, Tuple

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Histogram,
    Info,
    generate_latest,
)

logger = logging.getLogger(__name__)


# =============================================================================
# SUBMISSION METRICS
# =============================================================================

# Form submissions, labelled by how they ended
form_submissions_total = Counter(
    'form_submissions_total',
    'Total number of generation form submissions',
    ['outcome']  # outcome: generated, rejected, csrf_failed
)

# Validation failures
validation_failures_total = Counter(
    'validation_failures_total',
    'Total number of rejected submissions',
    ['validation_type']  # missing_fields, company_required, token_not_configured, invalid_token
)


# =============================================================================
# PROVIDER METRICS
# =============================================================================

provider_calls_total = Counter(
    'provider_calls_total',
    'Total number of LLM provider calls',
    ['provider', 'document', 'status']
)

provider_latency_seconds = Histogram(
    'provider_latency_seconds',
    'LLM provider call duration in seconds',
    ['provider', 'document'],
    buckets=[0.5, 1.0, 2.0, 5.0, 10.0, 20.0, 30.0, 60.0, 120.0]
)

provider_errors_total = Counter(
    'provider_errors_total',
    'Total number of failed LLM provider calls',
    ['provider', 'error_type']
)


# =============================================================================
# SYSTEM METRICS
# =============================================================================

application_info = Info(
    'application',
    'Application version and metadata'
)

application_info.info({
    'version': '0.1.0',
    'component': 'cv_cover_letter_generator'
})


def track_provider_call(document: str):
    """
    Decorator for provider client coroutines that produce one document.

    The provider label is read from the client's ``name`` attribute.

    Usage:
        @track_provider_call("cv")
        async def generate_cv(self, request):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(self, *args, **kwargs) -> Any:
            provider = self.name
            start_time = time()
            try:
                result = await func(self, *args, **kwargs)
                provider_calls_total.labels(
                    provider=provider, document=document, status='success'
                ).inc()
                return result
            except Exception as e:
                provider_calls_total.labels(
                    provider=provider, document=document, status='failure'
                ).inc()
                provider_errors_total.labels(
                    provider=provider, error_type=type(e).__name__
                ).inc()
                raise
            finally:
                provider_latency_seconds.labels(
                    provider=provider, document=document
                ).observe(time() - start_time)

        return wrapper
    return decorator


def record_submission(outcome: str) -> None:
    form_submissions_total.labels(outcome=outcome).inc()


def record_validation_failure(validation_type: str) -> None:
    """
    Record a rejected submission.

    Args:
        validation_type: missing_fields, company_required, token_not_configured, invalid_token
    """
    validation_failures_total.labels(validation_type=validation_type).inc()


def get_metrics() -> Tuple[bytes, str]:
    """
    Get current metrics in Prometheus format.

    Returns:
        Tuple of (metrics_data, content_type)
    """
    return generate_latest(), CONTENT_TYPE_LATEST
