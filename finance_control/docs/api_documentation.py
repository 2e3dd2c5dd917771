"""
General API information used to build the OpenAPI document.
"""

API_INFO = {
    "title": "Finance Control API",
    "version": "1.0.0",
    "description": (
        "Personal finance management API.\n\n"
        "- Transactions split between responsibles, organised by category "
        "and subcategory.\n"
        "- Financial goals with progress tracking.\n"
        "- Every response uses the same success/error envelope.\n"
        "- JWT bearer authentication."
    ),
    "contact": {"name": "Finance Control"},
    "license": {"name": "MIT", "url": "https://opensource.org/licenses/MIT"},
}

TAGS = [
    {
        "name": "Transaction categories",
        "description": "Top-level categories used to classify transactions",
    },
    {
        "name": "Transaction subcategories",
        "description": "Subcategories, unique by name within a category",
    },
    {
        "name": "Transaction responsibles",
        "description": "People or entities that share the cost of transactions",
    },
    {
        "name": "Transactions",
        "description": "Income and expenses of the authenticated user",
    },
    {
        "name": "Financial goals",
        "description": "Savings and investment goals of the authenticated user",
    },
    {"name": "Health", "description": "Infrastructure liveness checks"},
]
