# Analytical queries exposed by the API, listed by GET /api/queries once seeded.
QUERY_CATALOG = [
    {
        "query_name": "Portfolio Performance",
        "query_type": "join + aggregate + function",
        "endpoint": "GET /api/advanced/portfolio-performance",
        "description": "Every portfolio with its owner, total BUY investment, ROI, Beta and Alpha, ordered by ROI.",
    },
    {
        "query_name": "High Risk Users",
        "query_type": "nested",
        "endpoint": "GET /api/advanced/high-risk-users",
        "description": "High risk portfolios owned by users whose own risk appetite is High.",
    },
    {
        "query_name": "Sector Summary",
        "query_type": "aggregate",
        "endpoint": "GET /api/advanced/sector-summary",
        "description": "Assets held, market value and average risk rating per sector.",
    },
    {
        "query_name": "Add Transaction",
        "query_type": "procedure",
        "endpoint": "POST /api/advanced/add-transaction",
        "description": "Records a BUY or SELL, updates the holding and revalues the portfolio.",
    },
    {
        "query_name": "Generate Dashboard",
        "query_type": "procedure",
        "endpoint": "POST /api/advanced/generate-dashboard/{portfolio_id}",
        "description": "Recomputes ROI, Beta and Alpha for one portfolio.",
    },
    {
        "query_name": "User Summary",
        "query_type": "procedure",
        "endpoint": "GET /api/advanced/user-summary/{user_id}",
        "description": "Portfolios, value, investment, ROI and beneficiaries of a user.",
    },
    {
        "query_name": "Total Investment",
        "query_type": "function",
        "endpoint": "GET /api/portfolios/{id}/total-investment",
        "description": "Sum of BUY amounts of a portfolio.",
    },
    {
        "query_name": "Beneficiary Share Trigger",
        "query_type": "trigger",
        "endpoint": "POST /api/advanced/test-beneficiary-trigger",
        "description": "Rejects beneficiaries pushing a user's total share above 100.",
    },
]
