"""Amount-in-words renderer for receipts (Lac/Crore grouping by default)"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from fee_gateway.domain.exceptions import InvalidAmountError, InvalidScheduleError
from fee_gateway.utils.amounts import AmountInput, to_amount

ONES = ["", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine"]
TEENS = [
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen",
    "Fifteen", "Sixteen", "Seventeen", "Eighteen", "Nineteen",
]
TENS = ["", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety"]

# Words are only rendered for amounts below 10^30
MAX_WORDS_AMOUNT = 10 ** 30


@dataclass(frozen=True)
class Scale:
    """
    A named group above the hundreds.

    size is how many units of the value left above the previous group this
    scale consumes. None means "everything that is left", which is rendered
    recursively (1000 crore → "One Thousand Crore").
    """

    name: str
    size: Optional[int]


@dataclass(frozen=True)
class NumberingSystem:
    """Ordered scale table, lowest group first"""

    name: str
    scales: Tuple[Scale, ...]

    def __post_init__(self) -> None:
        if not self.scales or self.scales[-1].size is not None:
            raise InvalidScheduleError(f"{self.name}: last scale must be unbounded")
        if any(scale.size is None or scale.size < 2 for scale in self.scales[:-1]):
            raise InvalidScheduleError(f"{self.name}: only the last scale may be unbounded")


# 12,34,56,789 → 12 Crore 34 Lac 56 Thousand 789
INDIAN_NUMBERING = NumberingSystem(
    name="indian",
    scales=(Scale("Thousand", 100), Scale("Lac", 100), Scale("Crore", None)),
)

# 123,456,789 → 123 Million 456 Thousand 789
WESTERN_NUMBERING = NumberingSystem(
    name="western",
    scales=(Scale("Thousand", 1000), Scale("Million", 1000), Scale("Billion", None)),
)

NUMBERING_SYSTEMS = {
    INDIAN_NUMBERING.name: INDIAN_NUMBERING,
    WESTERN_NUMBERING.name: WESTERN_NUMBERING,
}


def _below_thousand(n: int) -> List[str]:
    words = []
    if n >= 100:
        words += [ONES[n // 100], "Hundred"]
        n %= 100
    if 10 <= n < 20:
        words.append(TEENS[n - 10])
    elif n >= 20:
        words.append(TENS[n // 10])
        if n % 10:
            words.append(ONES[n % 10])
    elif n > 0:
        words.append(ONES[n])
    return words


def _spell(n: int, numbering: NumberingSystem) -> List[str]:
    groups = [_below_thousand(n % 1000)]
    rest = n // 1000

    for scale in numbering.scales:
        if rest == 0:
            break
        if scale.size is None:
            chunk, rest = rest, 0
        else:
            chunk, rest = rest % scale.size, rest // scale.size
        # Zero groups are skipped, never rendered as "Zero Thousand"
        if chunk:
            groups.append(_spell(chunk, numbering) + [scale.name])

    words: List[str] = []
    for group in reversed(groups):
        words += group
    return words


def amount_to_words(
    amount: AmountInput,
    numbering: NumberingSystem = INDIAN_NUMBERING,
    currency: str = "Rupees",
) -> str:
    """
    Render a currency amount in English words followed by "<currency> Only".

    The fractional part is truncated, not rounded: 5660.99 renders as
    "Five Thousand Six Hundred Sixty Rupees Only". Negative amounts are
    clamped to zero.

    Raises:
        InvalidAmountError: amount is non-finite or not below MAX_WORDS_AMOUNT

    Example:
        1234 → "One Thousand Two Hundred Thirty Four Rupees Only"
        100000 → "One Lac Rupees Only"
    """
    value = to_amount(amount)
    if value >= MAX_WORDS_AMOUNT:
        raise InvalidAmountError("Amount too large to render in words")
    whole = int(value)
    words = _spell(whole, numbering) or ["Zero"]
    return " ".join(words + [currency, "Only"])
