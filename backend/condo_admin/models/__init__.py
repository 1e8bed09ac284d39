from __future__ import annotations

from condo_admin.models.expense import Expense
from condo_admin.models.post import Post
from condo_admin.models.revenue import Revenue

__all__ = [
    "Expense",
    "Post",
    "Revenue",
]
