from __future__ import annotations


def main() -> None:
    # [START README_QUICKSTART]
    from datetime import date

    from barrier_pricing import (
        FlatBlackVol,
        FlatDiscountCurve,
        FxEuropeanBarrierOption,
        FxMarket,
        PricingConfig,
        create_engine_factory,
    )
    from barrier_pricing.diagnostics import legs_frame

    market = FxMarket(
        spots={"EURUSD": 1.10},
        discount_curves={"EUR": FlatDiscountCurve(0.02), "USD": FlatDiscountCurve(0.04)},
        vols={"EURUSD": FlatBlackVol(0.10)},
    )
    config = PricingConfig(valuation_date=date(2026, 10, 17))
    factory = create_engine_factory(market, config)

    trade = FxEuropeanBarrierOption.from_dict(
        {
            "id": "EURUSD_UO_1",
            "TradeType": "FxEuropeanBarrierOption",
            "FxEuropeanBarrierOptionData": {
                "OptionData": {
                    "LongShort": "Long",
                    "OptionType": "Call",
                    "Style": "European",
                    "ExerciseDates": ["2027-10-17"],
                    "Premiums": [
                        {"Amount": 12_000.0, "Currency": "USD", "PayDate": "2026-10-21"}
                    ],
                },
                "BarrierData": {"Type": "UpOut", "Levels": [1.25], "Rebate": 0.005},
                "BoughtCurrency": "EUR",
                "BoughtAmount": 1_000_000.0,
                "SoldCurrency": "USD",
                "SoldAmount": 1_100_000.0,
            },
        }
    )
    trade.build(factory)

    print("NPV:", trade.npv(), trade.npv_currency)
    print("Maturity:", trade.maturity)
    print(legs_frame(trade.instrument.instrument))
    # [END README_QUICKSTART]


if __name__ == "__main__":
    main()
