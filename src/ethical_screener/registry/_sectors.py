# registry/_sectors.py

# Sector tag -> literal sector names considered members of that tag.
# Stocks are matched by exact membership, never by tag name. Methodologies may
# reference tags with no entry here (e.g. "interest_based_activities"); such
# tags match no sector.
SECTOR_CLASSIFICATIONS: dict[str, tuple[str, ...]] = {
    # Financial services
    "financial_services": (
        "Banks",
        "Insurance",
        "Financial Services",
        "Credit Services",
        "Investment Banking",
    ),
    "banks": (
        "Commercial Banks",
        "Investment Banks",
        "Regional Banks",
        "Savings Banks",
    ),
    "insurance": (
        "Life Insurance",
        "Property Insurance",
        "Health Insurance",
        "Reinsurance",
    ),
    # Prohibited substances
    "alcohol": (
        "Alcoholic Beverages",
        "Distillers & Vintners",
        "Brewers",
        "Wine & Spirits",
    ),
    "tobacco": ("Tobacco", "Cigarettes", "E-cigarettes", "Tobacco Products"),
    "pork": ("Pork Processing", "Pork Products", "Pig Farming"),
    # Activities
    "gambling": (
        "Casinos & Gaming",
        "Gambling",
        "Lottery",
        "Sports Betting",
        "Online Gaming",
    ),
    "adult_entertainment": ("Adult Entertainment", "Strip Clubs", "Adult Content"),
    "defense": ("Defense", "Aerospace & Defense", "Weapons", "Military Equipment"),
    # Food and agriculture
    "kosher_food": (
        "Kosher Food Products",
        "Kosher Restaurants",
        "Kosher Certification",
    ),
    "non_kosher_food": ("Pork Products", "Shellfish", "Mixed Meat & Dairy"),
    "shellfish": ("Shellfish Processing", "Crab", "Lobster", "Shrimp"),
    # ESG related
    "clean_energy": (
        "Solar Energy",
        "Wind Energy",
        "Hydroelectric",
        "Geothermal",
        "Clean Technology",
    ),
    "fossil_fuels": ("Oil & Gas", "Coal", "Oil Refining", "Natural Gas"),
    "thermal_coal": ("Coal Mining", "Coal Power", "Thermal Coal"),
    "weapons": ("Weapons Manufacturing", "Military Contractors", "Defense Systems"),
    # Social good
    "healthcare": (
        "Healthcare",
        "Pharmaceuticals",
        "Medical Devices",
        "Healthcare Services",
        "Biotechnology",
    ),
    "education": ("Education Services", "Online Education", "Educational Technology"),
    "community_development": ("Community Banks", "Affordable Housing", "Microfinance"),
    # Textiles
    "mixed_textiles": ("Mixed Fiber Clothing", "Linen-Wool Blends"),
    # Christian specific
    "abortion_services": ("Abortion Clinics", "Abortion Pharmaceuticals"),
    "contraceptives": ("Contraceptive Manufacturing", "Birth Control"),
    "predatory_lending": ("Payday Loans", "Title Loans", "High-Interest Lending"),
    # Technology
    "technology": ("Software", "Hardware", "Internet Services", "Cloud Computing"),
    "sustainable_tech": (
        "Clean Technology",
        "Energy Efficiency",
        "Sustainable Materials",
    ),
}
