"""canonical coupon types and upper-case codes

Revision ID: 0002
Revises: 0001
Create Date: 2025-11-10 12:00:00

Старые данные содержат типы в разных регистрах ('percent' из корзины,
'PERCENT' из админки). Приводим к одному словарю:
PERCENT | BUY_X | FIRST_ORDER | DATE_RANGE. Значения вне словаря
(например, BUY_X_GET_Y) не трогаем: движок отвечает на них
"Unknown coupon type".
"""
from typing import Sequence, Union

from alembic import op

revision: str = "0002"
down_revision: Union[str, None] = "0001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

CANONICAL_TYPES = ("PERCENT", "BUY_X", "FIRST_ORDER", "DATE_RANGE")


def upgrade() -> None:
    for coupon_type in CANONICAL_TYPES:
        op.execute(
            f"UPDATE coupons SET type = '{coupon_type}' "
            f"WHERE UPPER(TRIM(type)) = '{coupon_type}' AND type <> '{coupon_type}'"
        )
    op.execute("UPDATE coupons SET code = UPPER(TRIM(code)) WHERE code <> UPPER(TRIM(code))")


def downgrade() -> None:
    # Исходный регистр не сохранялся
    pass
