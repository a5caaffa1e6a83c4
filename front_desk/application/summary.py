"""
Текстовые сводки по бронированию для отображения пользователю.
"""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from front_desk.domain import PriceQuote
from front_desk.shared_kernel import PaymentMethod

SUMMARY_HEADER = "------ Сводка бронирования ------"

INCLUDED_ITEMS = (
    "зубная щетка",
    "мыло",
    "зубная паста",
    "полотенце",
    "телевизор",
    "прачечная",
    "бесплатный Wi-Fi",
    "круглосуточное обслуживание номеров",
)

PAYMENT_LABELS = {
    PaymentMethod.ONLINE: "онлайн-оплата",
    PaymentMethod.CASH: "оплата в отеле",
}


def format_money(amount: Decimal, currency: str = "₹") -> str:
    """Сумма с двумя знаками после запятой."""
    return f"{currency}{amount.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)}"


def _format_percent(value: Decimal) -> str:
    return f"{value.normalize():f}"


def _format_moment(value: datetime) -> str:
    if value.hour == value.minute == value.second == 0:
        return value.date().isoformat()
    return value.isoformat(sep=" ", timespec="minutes")


def render_price_line(quote: PriceQuote, currency: str = "₹") -> str:
    """Короткая строка предварительного расчета."""
    return f"Итого: {format_money(quote.total, currency)} (ночей: {quote.nights})"


def render_summary(
    quote: PriceQuote, currency: str = "₹", room_number: Optional[int] = None
) -> str:
    """Детализированная сводка бронирования.

    Если передан room_number, сразу после заголовка добавляется строка
    с назначенным номером.
    """
    stay = quote.stay
    lines = [SUMMARY_HEADER]
    if room_number is not None:
        lines.append(f"Назначен номер: {room_number}")
    lines += [
        f"Гость: {stay.guest_name}",
        f"Заезд: {_format_moment(stay.checkin)}",
        f"Выезд: {_format_moment(stay.checkout)}",
        f"Ночей: {quote.nights}",
        f"Тип номера: {stay.room_type.value.upper()}",
        f"Доп. кровати: {stay.beds}",
        f"Доп. подушки: {stay.pillows}",
        "",
        f"Проживание: {format_money(quote.room_charge, currency)}",
        f"Кровати: {format_money(quote.bed_charge, currency)}",
        f"Подушки: {format_money(quote.pillow_charge, currency)}",
        f"Налог ({_format_percent(quote.tax_percent)}%): {format_money(quote.tax, currency)}",
        f"Итого к оплате: {format_money(quote.total, currency)}",
        "",
        f"Способ оплаты: {PAYMENT_LABELS[stay.payment]}",
        "",
        f"Включено: {', '.join(INCLUDED_ITEMS)}.",
    ]
    return "\n".join(lines)
