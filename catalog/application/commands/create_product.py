"""
CreateProductCommand.

Command to add a product to the catalog from the admin form.
"""
from dataclasses import dataclass

from brands.domain.session import CallerContext
from catalog.domain.form_input import ProductFormInput


@dataclass
class CreateProductCommand:
    """Command to create a product."""

    caller: CallerContext
    form: ProductFormInput
