"""Age Pension and CSHC rate snapshots, keyed by effective date."""

from __future__ import annotations

from typing import Any, Final

DEFAULT_EFFECTIVE_DATE: Final[str] = "2025-09-20"

HOUSEHOLD_STATUSES: Final[tuple[str, ...]] = ("single", "couple")
HOMEOWNER_KEYS: Final[dict[bool, str]] = {True: "homeowner", False: "non_homeowner"}

# Amounts are strings so they parse into Decimal without binary rounding.
# Per-period figures are fortnightly; couple figures are combined unless the key says otherwise.
AGE_PENSION_RATES: Final[dict[str, dict[str, Any]]] = {
    "2025-09-20": {
        "periods_per_year": 26,
        "max_rate": {
            "single": "1178.70",
            "couple_each": "888.50",
        },
        "income_test": {
            "free_area": {"single": "218", "couple": "380"},
            "taper_rate": {"single": "0.50", "couple": "0.50"},
        },
        "assets_test": {
            "full_limit": {
                "single": {"homeowner": "321500", "non_homeowner": "579500"},
                "couple": {"homeowner": "481500", "non_homeowner": "739500"},
            },
            "cutoff": {
                "single": {"homeowner": "714500", "non_homeowner": "972500"},
                "couple": {"homeowner": "1074000", "non_homeowner": "1332000"},
            },
            # $3 per fortnight for every $1,000 over the full-pension limit.
            "taper_rate": "3",
            "taper_unit": "1000",
        },
        "deeming": {
            "threshold": {"single": "64200", "couple": "106200"},
            "lower_rate": "0.0075",
            "upper_rate": "0.0275",
        },
        "work_bonus": "300",
    },
}

CSHC_STATUSES: Final[tuple[str, ...]] = ("single", "couple", "separated")

# Annual adjusted taxable income thresholds (plus deemed account-based pension income).
CSHC_THRESHOLDS: Final[dict[str, dict[str, Any]]] = {
    "2025-09-20": {
        "income_threshold": {
            "single": "101105",
            "couple": "161768",
            "separated": "202210",
        },
        "child_add_on": "639.60",
    },
}

JOBSEEKER_STATUS_ALIASES: Final[dict[str, str]] = {"partnered": "couple"}

# Fortnightly JobSeeker Payment rates. Couple rates are per partner; couple asset limits are combined.
JOBSEEKER_RATES: Final[dict[str, dict[str, Any]]] = {
    "2025-09-20": {
        "periods_per_year": 26,
        "max_rate": {
            "single": "762.70",
            "single_with_children": "816.90",
            "couple": "698.30",
        },
        "energy_supplement": {"single": "14.10", "couple": "10.60"},
        # Any amount over the limit cancels the payment.
        "asset_limit": {
            "single": {"homeowner": "301750", "non_homeowner": "543750"},
            "couple": {"homeowner": "451500", "non_homeowner": "693500"},
        },
        "income_test": {
            "free_area": "150",
            "lower_taper_limit": "256",
            "lower_taper_rate": "0.50",
            "upper_taper_rate": "0.60",
        },
        "partner_income": {"free_area": "1400", "taper_rate": "0.60"},
    },
}
