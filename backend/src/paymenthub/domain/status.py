"""
Normalized payment status.

Gateways report the same outcome under different words ("paid",
"approved", "success"...). PaymentStatus keeps every spelling seen in
the wild and groups them so callers can ask one question.
"""

from enum import Enum


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    PAID = "paid"
    APPROVED = "approved"
    COMPLETED = "completed"
    SUCCESS = "success"
    FAILED = "failed"
    DECLINED = "declined"
    REJECTED = "rejected"
    ERROR = "error"
    CANCELLED = "cancelled"
    CANCELED = "canceled"
    VOIDED = "voided"
    REFUNDED = "refunded"
    WAITING = "waiting"

    @classmethod
    def from_string(cls, status: str) -> "PaymentStatus":
        """Case-insensitive lookup; unknown statuses fall back to PENDING."""
        try:
            return cls(status.strip().lower())
        except (AttributeError, ValueError):
            return cls.PENDING

    def is_paid(self) -> bool:
        return self in _PAID

    def is_pending(self) -> bool:
        return self in _PENDING

    def is_failed(self) -> bool:
        return self in _FAILED

    def is_cancelled(self) -> bool:
        return self in _CANCELLED

    def is_refunded(self) -> bool:
        return self is PaymentStatus.REFUNDED

    @property
    def label(self) -> str:
        """Portuguese label shown to the payer."""
        if self.is_paid():
            return "Aprovado"
        if self.is_failed():
            return "Recusado"
        if self.is_cancelled():
            return "Cancelado"
        match self:
            case PaymentStatus.PENDING:
                return "Pendente"
            case PaymentStatus.PROCESSING:
                return "Processando"
            case PaymentStatus.WAITING:
                return "Aguardando"
            case PaymentStatus.REFUNDED:
                return "Reembolsado"
        return self.value

    @property
    def color(self) -> str:
        """UI color bucket."""
        if self.is_paid():
            return "green"
        if self.is_pending():
            return "yellow"
        if self.is_failed():
            return "red"
        if self.is_refunded():
            return "blue"
        return "gray"


_PAID = frozenset({
    PaymentStatus.PAID,
    PaymentStatus.APPROVED,
    PaymentStatus.COMPLETED,
    PaymentStatus.SUCCESS,
})
_PENDING = frozenset({
    PaymentStatus.PENDING,
    PaymentStatus.PROCESSING,
    PaymentStatus.WAITING,
})
_FAILED = frozenset({
    PaymentStatus.FAILED,
    PaymentStatus.DECLINED,
    PaymentStatus.REJECTED,
    PaymentStatus.ERROR,
})
_CANCELLED = frozenset({
    PaymentStatus.CANCELLED,
    PaymentStatus.CANCELED,
    PaymentStatus.VOIDED,
})
