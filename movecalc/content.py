# movecalc/content.py
# Static page copy. No logic lives here.

APP_TITLE = "Moving Cost Estimator (2026)"
APP_SUBTITLE = "Estimate local vs long distance moving costs"
PAGE_ICON = "🚚"

MOVING_TIPS = [
    "Get at least 3 quotes from licensed movers",
    "Book early during peak season (May–September)",
    "Declutter before moving to reduce costs",
    "Verify insurance coverage and licensing",
]

DISCLAIMER = (
    "This calculator provides estimates of moving costs based on general industry averages. "
    "Actual costs vary significantly by location, season, specific services, and moving company rates. "
    "The figures shown are estimates only and do not constitute a binding quote. "
    "Always obtain detailed quotes from licensed movers before booking. "
    "Verify licensing and insurance before hiring any moving company."
)

FOOTER_NOTES = ["Estimates only", "Not a binding quote", "Free to use"]

FOOTER_LINKS = [
    ("Privacy Policy", "https://scenariocalculators.com/privacy"),
    ("Terms of Service", "https://scenariocalculators.com/terms"),
]

COPYRIGHT = "© 2026 Moving Cost Estimator"
