from .curves import BlackVol, DiscountCurve, FlatBlackVol, FlatDiscountCurve, zero_rate
from .fx import FxMarket, GarmanKohlhagenProcess

__all__ = [
    "BlackVol",
    "DiscountCurve",
    "FlatBlackVol",
    "FlatDiscountCurve",
    "FxMarket",
    "GarmanKohlhagenProcess",
    "zero_rate",
]
