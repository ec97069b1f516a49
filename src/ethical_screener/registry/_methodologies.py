# registry/_methodologies.py

# Prohibited tags shared by every index-provider Shariah methodology
_SHARIAH_PROHIBITED = (
    "financial_services",
    "banks",
    "insurance",
    "alcohol",
    "tobacco",
    "gambling",
    "adult_entertainment",
    "defense",
    "pork",
)

# Methodology key -> raw methodology record. Declaration order is the
# fallback order used when a requested key is not available for a type.
METHODOLOGIES: dict[str, dict[str, object]] = {
    # Islamic
    "AAOIFI": {
        "name": "AAOIFI",
        "type": "islamic",
        "description": (
            "Accounting and Auditing Organization for Islamic Financial "
            "Institutions standard"
        ),
        "criteria": {
            "cash_limit": 30,
            "debt_limit": 30,
            "receivables_limit": 67,
            "impermissible_income_limit": 5,
            "use_total_assets": False,
        },
        "prohibited_sectors": (*_SHARIAH_PROHIBITED, "interest_based_activities"),
        "region": "Global",
        "authority": "AAOIFI",
        "year_established": 1991,
        "last_updated": "2020",
    },
    "DJIM": {
        "name": "Dow Jones Islamic Market",
        "type": "islamic",
        "description": "S&P Dow Jones Indices Sharia screening methodology",
        "criteria": {
            "cash_limit": 33,
            "debt_limit": 33,
            "receivables_limit": 33,
            "impermissible_income_limit": 5,
            "use_total_assets": False,
        },
        "prohibited_sectors": _SHARIAH_PROHIBITED,
        "region": "Global",
        "authority": "S&P Dow Jones Indices",
        "year_established": 1999,
        "last_updated": "2023",
    },
    "FTSE": {
        "name": "FTSE Shariah",
        "type": "islamic",
        "description": "FTSE Russell Shariah screening methodology",
        "criteria": {
            "cash_limit": 33,
            "debt_limit": 33,
            "receivables_limit": 50,
            "impermissible_income_limit": 5,
            "use_total_assets": True,
        },
        "prohibited_sectors": _SHARIAH_PROHIBITED,
        "region": "Global",
        "authority": "FTSE Russell",
        "year_established": 1998,
        "last_updated": "2023",
    },
    "MSCI": {
        "name": "MSCI Islamic",
        "type": "islamic",
        "description": "MSCI Islamic screening methodology",
        "criteria": {
            "cash_limit": "33.33",
            "debt_limit": "33.33",
            "receivables_limit": "33.33",
            "impermissible_income_limit": 5,
            "use_total_assets": True,
        },
        "prohibited_sectors": _SHARIAH_PROHIBITED,
        "region": "Global",
        "authority": "MSCI Inc",
        "year_established": 2007,
        "last_updated": "2023",
    },
    "MSCI_M_SERIES": {
        "name": "MSCI Islamic M-Series",
        "type": "islamic",
        "description": "MSCI Islamic M-Series with market cap based calculations",
        "criteria": {
            "cash_limit": "33.33",
            "debt_limit": "33.33",
            "receivables_limit": 49,
            "impermissible_income_limit": 5,
            "use_total_assets": False,
        },
        "prohibited_sectors": _SHARIAH_PROHIBITED,
        "region": "Global",
        "authority": "MSCI Inc",
        "year_established": 2018,
        "last_updated": "2023",
    },
    "SP500": {
        "name": "S&P 500 Shariah",
        "type": "islamic",
        "description": "S&P 500 Shariah compliant screening methodology",
        "criteria": {
            "cash_limit": 33,
            "debt_limit": 33,
            "receivables_limit": 49,
            "impermissible_income_limit": 5,
            "use_total_assets": False,
        },
        "prohibited_sectors": _SHARIAH_PROHIBITED,
        "region": "US",
        "authority": "S&P Dow Jones Indices",
        "year_established": 2006,
        "last_updated": "2023",
    },
    "INDONESIA": {
        "name": "Indonesia Islamic",
        "type": "islamic",
        "description": "Indonesian Islamic capital market screening standards",
        "criteria": {
            "debt_limit": 45,
            "impermissible_income_limit": 10,
            "use_total_assets": True,
        },
        "prohibited_sectors": _SHARIAH_PROHIBITED,
        "region": "Indonesia",
        "authority": "OJK (Financial Services Authority)",
        "year_established": 2012,
        "last_updated": "2023",
    },
    "MALAYSIA": {
        "name": "Malaysia SC Shariah",
        "type": "islamic",
        "description": "Securities Commission Malaysia Shariah screening methodology",
        "criteria": {
            "cash_limit": 33,
            "debt_limit": 33,
            # higher tolerance for mixed businesses
            "impermissible_income_limit": 25,
            "use_total_assets": True,
        },
        "prohibited_sectors": _SHARIAH_PROHIBITED,
        "preferred_sectors": (
            "islamic_banking",
            "halal_food",
            "technology",
            "healthcare",
        ),
        "region": "Malaysia",
        "authority": "Securities Commission Malaysia",
        "year_established": 1997,
        "last_updated": "2023",
    },
    # ESG
    "MSCI_ESG": {
        "name": "MSCI ESG Ratings",
        "type": "esg",
        "description": "MSCI ESG Research ratings methodology",
        "criteria": {
            "min_esg_score": "7.0",
            "max_carbon_intensity": 100,
            "min_board_diversity": 30,
            "exclude_controversies": True,
        },
        # ratings apply to every industry, so no preferred-sector gate
        "prohibited_sectors": (
            "tobacco",
            "weapons",
            "thermal_coal",
            "oil_sands",
            "arctic_drilling",
        ),
        "region": "Global",
        "authority": "MSCI Inc",
        "year_established": 2010,
        "last_updated": "2024",
    },
    "SUSTAINALYTICS": {
        "name": "Sustainalytics ESG Risk",
        "type": "esg",
        "description": "Sustainalytics ESG Risk Rating methodology",
        "criteria": {
            "max_esg_risk": 25,
            "min_governance_score": 60,
            "exclude_severe_controversies": True,
        },
        "prohibited_sectors": (
            "tobacco",
            "weapons",
            "gambling",
            "adult_entertainment",
            "predatory_lending",
        ),
        "preferred_sectors": (
            "renewable_energy",
            "healthcare",
            "education",
            "sustainable_tech",
        ),
        "region": "Global",
        "authority": "Sustainalytics",
        "year_established": 2009,
        "last_updated": "2024",
    },
    "FTSE4GOOD": {
        "name": "FTSE4Good",
        "type": "esg",
        "description": "FTSE Russell sustainable investment index series",
        "criteria": {
            "min_esg_score": "6.5",
            "exclude_controversies": True,
            "min_board_diversity": 25,
        },
        "prohibited_sectors": (
            "tobacco",
            "weapons",
            "nuclear_power",
            "adult_entertainment",
        ),
        "preferred_sectors": ("clean_technology", "healthcare", "education"),
        "region": "Global",
        "authority": "FTSE Russell",
        "year_established": 2001,
        "last_updated": "2024",
    },
    # Christian
    "SRI": {
        "name": "Socially Responsible Investing",
        "type": "christian",
        "description": "General Christian socially responsible investing principles",
        "criteria": {
            "exclude_sin_stocks": True,
            "min_community_impact_score": "6.0",
            "support_human_dignity": True,
            "exclude_severe_controversies": True,
        },
        "prohibited_sectors": (
            "alcohol",
            "tobacco",
            "gambling",
            "adult_entertainment",
            "abortion_services",
            "predatory_lending",
            "private_prisons",
        ),
        "preferred_sectors": (
            "healthcare",
            "education",
            "clean_energy",
            "community_development",
            "affordable_housing",
        ),
        "region": "Global",
        "authority": "Various Christian organizations",
        "year_established": 1970,
        "last_updated": "2024",
    },
    "CATHOLIC": {
        "name": "Catholic Social Teaching",
        "type": "christian",
        "description": "Catholic Church social teaching principles for investing",
        "criteria": {
            "exclude_sin_stocks": True,
            "min_community_impact_score": "7.0",
            "support_human_dignity": True,
        },
        "prohibited_sectors": (
            "alcohol",
            "tobacco",
            "gambling",
            "adult_entertainment",
            "abortion_services",
            "contraceptives",
            "embryonic_stem_cell",
            "predatory_lending",
        ),
        "preferred_sectors": (
            "healthcare",
            "education",
            "community_development",
            "fair_trade",
            "microfinance",
        ),
        "region": "Global",
        "authority": "Vatican/Catholic Church",
        "year_established": 1891,
        "last_updated": "2024",
    },
    # Jewish
    "ORTHODOX": {
        "name": "Orthodox Jewish Values",
        "type": "jewish",
        "description": "Orthodox Jewish halachic principles for investing",
        "criteria": {
            "kosher_food_only": True,
            "sabbath_observant": True,
            "exclude_mixed_textiles": True,
        },
        "prohibited_sectors": (
            "pork",
            "shellfish",
            "non_kosher_food",
            "mixed_textiles",
            "gambling",
            "adult_entertainment",
            "interest_based_lending",
        ),
        "preferred_sectors": (
            "kosher_food",
            "technology",
            "healthcare",
            "education",
            "israel_bonds",
        ),
        "region": "Global",
        "authority": "Orthodox rabbinical authorities",
        "year_established": 1980,
        "last_updated": "2024",
    },
    "CONSERVATIVE": {
        "name": "Conservative Jewish Values",
        "type": "jewish",
        "description": "Conservative Jewish movement ethical investing principles",
        "criteria": {
            "kosher_food_only": False,
            "sabbath_observant": False,
            "exclude_mixed_textiles": False,
        },
        "prohibited_sectors": ("pork", "gambling", "adult_entertainment", "weapons"),
        "preferred_sectors": ("technology", "healthcare", "education", "social_justice"),
        "region": "Global",
        "authority": "Conservative Jewish movement",
        "year_established": 1985,
        "last_updated": "2024",
    },
    # Custom
    "USER_DEFINED": {
        "name": "User Defined",
        "type": "custom",
        "description": "Empty methodology to be tailored by the user",
        "criteria": {"custom_rules": {}},
        "prohibited_sectors": (),
        "region": "Global",
        "authority": "User defined",
    },
}
