from .product_store import (  # noqa: F401
    ProductCatalog,
    find_by_id,
    insert,
    next_id,
    remove_by_id,
    update_fields,
)
