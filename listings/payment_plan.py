from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple
from listings.formatting import PLACEHOLDER, fmt_price, plain_number
from listings.settings import setting


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class PaymentPlan:
    """Payment plan of a Dubai South project. Any subset of the fields may be present."""
    percentages: Tuple[Dict[str, Any], ...] = ()
    installments: Optional[float] = None
    total_price: Optional[float] = None
    notes: Optional[str] = None

    @classmethod
    def from_raw(cls, raw) -> Optional["PaymentPlan"]:
        if not raw or not isinstance(raw, dict):
            return None
        steps = raw.get("percentages")
        return cls(
            percentages=tuple(s for s in steps if isinstance(s, dict)) if isinstance(steps, list) else (),
            installments=raw["installments"] if _is_number(raw.get("installments")) else None,
            total_price=raw["total_price"] if _is_number(raw.get("total_price")) else None,
            notes=raw.get("notes") or None,
        )

    def badges(self) -> List[str]:
        out = []
        for step in self.percentages:
            out.append(f"{plain_number(step.get('value', ''))}% {step.get('label') or ''}".strip())
        if self.installments is not None:
            out.append(f"عدد الدفعات: {plain_number(self.installments)}")
        if self.total_price is not None:
            out.append(f"إجمالي: {fmt_price(self.total_price)}")
        if self.notes:
            out.append(str(self.notes))
        return out


def installment_years_label(plan: Optional[Dict[str, Any]]) -> str:
    years = (plan or {}).get("installment_years")
    if not years:
        return PLACEHOLDER
    return f"{plain_number(years)} {setting('units', 'years')}"
