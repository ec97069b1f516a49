# registry/_screening_types.py

# Screening type -> descriptor. Methodology keys are listed in discovery order.
SCREENING_TYPES: dict[str, dict[str, object]] = {
    "islamic": {
        "name": "Islamic Finance",
        "description": "Sharia-compliant investing principles based on Islamic law",
        "icon": "\N{MOSQUE}",
        "color": "emerald",
        "methodologies": (
            "AAOIFI",
            "DJIM",
            "FTSE",
            "MSCI",
            "MSCI_M_SERIES",
            "SP500",
            "INDONESIA",
            "MALAYSIA",
        ),
        "market_size": "$2.4 trillion",
        "global_assets": "Growing 10-15% annually",
    },
    "esg": {
        "name": "ESG",
        "description": (
            "Environmental, Social, and Governance focused sustainable investing"
        ),
        "icon": "\N{SEEDLING}",
        "color": "green",
        "methodologies": (
            "MSCI_ESG",
            "SUSTAINALYTICS",
            "FTSE4GOOD",
            "REFINITIV_ESG",
            "CUSTOM_ESG",
        ),
        "market_size": "$35 trillion",
        "global_assets": "33% of global assets under management",
    },
    "christian": {
        "name": "Christian Values",
        "description": "Faith-based investing aligned with Christian ethical principles",
        "icon": "\N{LATIN CROSS}",
        "color": "blue",
        "methodologies": (
            "SRI",
            "CATHOLIC",
            "PROTESTANT",
            "EVANGELICAL",
            "CUSTOM_CHRISTIAN",
        ),
        "market_size": "$1.2 trillion",
        "global_assets": "Largest faith-based investing segment",
    },
    "jewish": {
        "name": "Jewish Values",
        "description": "Kosher investing aligned with Jewish ethical and dietary laws",
        "icon": "\N{STAR OF DAVID}",
        "color": "indigo",
        "methodologies": ("ORTHODOX", "CONSERVATIVE", "REFORM", "CUSTOM_JEWISH"),
        "market_size": "$150 billion",
        "global_assets": "Fastest growing faith-based segment",
    },
    "custom": {
        "name": "Custom Criteria",
        "description": "Build your own ethical screening methodology",
        "icon": "\N{DIRECT HIT}",
        "color": "purple",
        "methodologies": ("USER_DEFINED",),
        "market_size": "Unlimited potential",
        "global_assets": "Personalized investing approach",
    },
}
