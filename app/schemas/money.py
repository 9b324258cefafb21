from decimal import Decimal
from typing import Annotated

from pydantic import PlainSerializer

# Balances and prices are exact decimals internally and plain JSON numbers on the wire.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
