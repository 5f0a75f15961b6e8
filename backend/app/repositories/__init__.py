"""
Repositories package — data-access layer.

Each repository file handles all store operations for one collection.
Repositories do NOT handle HTTP concerns; they raise AppError subclasses
that the API layer renders.

Convention:
    - One file per collection (courses.py, bids.py)
    - All functions accept the Motor database as the first argument
    - Driver errors are translated to StoreFailure by @store_operation
"""
