"""
Regions Configuration

Default sales regions and their tax settings, loaded into a RegionRegistry.

Format:
{
    "name": "Region name",
    "currency_code": "iso-4217, lower case",
    "tax_rate": "percentage as string" | None,
    "tax_code": "GST" | "VAT" | "HST" | None,
}

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

DEFAULT_REGIONS = [
    {
        "name": "India",
        "currency_code": "inr",
        "tax_rate": "18",  # 9% CGST + 9% SGST
        "tax_code": "GST",
    },
    {
        "name": "North America",
        "currency_code": "usd",
        "tax_rate": "0",  # Sales tax handled outside the platform
        "tax_code": "VAT",
    },
    {
        "name": "Europe",
        "currency_code": "eur",
        "tax_rate": "20",  # VAT average
        "tax_code": "VAT",
    },
]

MORE_REGIONS = [
    {
        "name": "United Kingdom",
        "currency_code": "gbp",
        "tax_rate": "20",
        "tax_code": "VAT",
    },
    {
        "name": "Middle East (Gulf)",
        "currency_code": "aed",
        "tax_rate": "5",
        "tax_code": "VAT",
    },
    {
        "name": "Australia",
        "currency_code": "aud",
        "tax_rate": "10",
        "tax_code": "GST",
    },
    {
        "name": "Japan",
        "currency_code": "jpy",
        "tax_rate": "10",
        "tax_code": "VAT",
    },
    {
        "name": "Canada",
        "currency_code": "cad",
        "tax_rate": "13",
        "tax_code": "HST",
    },
]
