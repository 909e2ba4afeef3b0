"""
Pydantic schema definitions for API payloads.

Each entity kind defines its own request and response models.  Wire
names are camelCase (``createdAt``, ``selectedProducts``) while the
Python attributes stay snake_case; models accept either on input and
are dumped by alias on output.
"""
