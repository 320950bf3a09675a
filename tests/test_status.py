"""Tests for PaymentStatus normalization and grouping."""

import pytest

from paymenthub.domain.status import PaymentStatus


@pytest.mark.parametrize("raw, status", [
    ("paid", PaymentStatus.PAID),
    ("APPROVED", PaymentStatus.APPROVED),
    (" Refunded ", PaymentStatus.REFUNDED),
    ("canceled", PaymentStatus.CANCELED),
])
def test_from_string(raw, status):
    assert PaymentStatus.from_string(raw) is status


@pytest.mark.parametrize("raw", ["mystery", "", None])
def test_unknown_status_defaults_to_pending(raw):
    assert PaymentStatus.from_string(raw) is PaymentStatus.PENDING


def test_every_status_belongs_to_exactly_one_group():
    for status in PaymentStatus:
        groups = [
            status.is_paid(),
            status.is_pending(),
            status.is_failed(),
            status.is_cancelled(),
            status.is_refunded(),
        ]
        assert groups.count(True) == 1, status


@pytest.mark.parametrize("status, label, color", [
    (PaymentStatus.SUCCESS, "Aprovado", "green"),
    (PaymentStatus.WAITING, "Aguardando", "yellow"),
    (PaymentStatus.PROCESSING, "Processando", "yellow"),
    (PaymentStatus.DECLINED, "Recusado", "red"),
    (PaymentStatus.VOIDED, "Cancelado", "gray"),
    (PaymentStatus.REFUNDED, "Reembolsado", "blue"),
    (PaymentStatus.PENDING, "Pendente", "yellow"),
])
def test_label_and_color(status, label, color):
    assert status.label == label
    assert status.color == color
