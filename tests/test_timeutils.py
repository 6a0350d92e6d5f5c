"""Tests for the UTC clock helper."""

from datetime import datetime, timedelta, timezone

from app.core.timeutils import utcnow


def test_utcnow_is_naive_utc():
    now = utcnow()
    assert now.tzinfo is None
    reference = datetime.now(timezone.utc).replace(tzinfo=None)
    assert abs(reference - now) < timedelta(seconds=5)


def test_model_timestamps_use_utcnow(product_store, make_product):
    before = utcnow()
    product = product_store.get(make_product())
    assert product.createdAt.tzinfo is None
    assert before - timedelta(seconds=1) <= product.createdAt <= utcnow() + timedelta(seconds=1)
