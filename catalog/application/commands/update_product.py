"""
UpdateProductCommand.

Command to overwrite an existing product from the admin form.
"""
from dataclasses import dataclass
from typing import Optional

from brands.domain.session import CallerContext
from catalog.domain.form_input import ProductFormInput


@dataclass
class UpdateProductCommand:
    """Command to update a product. ``product_id`` is raw text from the form."""

    caller: CallerContext
    product_id: Optional[str]
    form: ProductFormInput
