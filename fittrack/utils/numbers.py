from decimal import Decimal, ROUND_HALF_UP


def round_half_up(value, ndigits: int = 0):
    """Round halves up on the float's exact binary value, as ``Math.round``/``toFixed`` do.

    ``round_half_up(1.005, 2)`` is ``1.0`` because 1.005 is stored as
    1.00499999... Returns an ``int`` when ``ndigits`` is 0, otherwise a ``float``.
    """
    quantum = Decimal(1).scaleb(-ndigits)
    rounded = Decimal(float(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    if ndigits == 0:
        return int(rounded)
    return float(rounded)
