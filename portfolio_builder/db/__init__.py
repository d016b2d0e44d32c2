"""
portfolio_builder/db/__init__.py

Database module exports.

All database operations are organized by domain:
- connection.py: Connection and schema management
- users.py: User operations (read and write)
- portfolios.py: Portfolio documents (read and write)
- templates.py: Template catalog (read, write, seeding)
- template_purchases.py: Premium template purchase requests
"""

# Connection and schema
from .connection import connect, init_schema

# User operations
from .users import (
    get_user_by_id,
    get_user_by_username,
    get_user_auth_by_username,
    create_user_with_password,
    get_or_create_user,
    set_user_role,
)

# Portfolio operations
from .portfolios import (
    SECTION_COLUMNS,
    insert_portfolio,
    list_portfolios,
    get_portfolio_row,
    update_portfolio,
    delete_portfolio,
)

# Template catalog
from .templates import (
    list_templates,
    get_template_by_id,
    insert_template,
    seed_default_templates,
    EDITABLE_COLUMNS,
    update_template,
    delete_template,
    increment_template_popularity,
)

# Purchase requests
from .template_purchases import (
    PURCHASE_STATUSES,
    insert_purchase_request,
    get_purchase,
    list_user_purchases,
    list_purchases,
    get_latest_user_purchase,
    has_approved_purchase,
    set_purchase_status,
)
