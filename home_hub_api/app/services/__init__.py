"""
Service layer.

Each service encapsulates the validation rules and store operations
for one entity kind.  Services receive the ``RecordStore`` explicitly
so endpoints stay thin and tests can hand in a fresh store.
"""
