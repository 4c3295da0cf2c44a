from inventory.models.category_model import Category

__all__ = ["Category"]
