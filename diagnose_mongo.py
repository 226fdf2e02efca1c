"""
Diagnose MongoDB connectivity and dataset query timing.
"""

import time

from pymongo.errors import PyMongoError

from core import dataset_repo
from core.errors import StorageUnavailable

print("=" * 60)
print("MongoDB Diagnostics")
print("=" * 60)
print(f"\nDatabase: {dataset_repo.get_db_name()}.{dataset_repo.COLLECTION_NAME}")

print("\n--- Test 1: Connection Time ---")
start = time.time()
try:
    collection = dataset_repo.get_collection()
    collection.database.client.admin.command("ping")
    print(f"Connection established: {(time.time() - start) * 1000:.2f}ms")
except (PyMongoError, StorageUnavailable) as e:
    print(f"Connection failed: {e}")
    raise SystemExit(1)

print("\n--- Test 2: Dataset Queries ---")

start = time.time()
count = dataset_repo.count_datasets()
print(f"count_datasets(): {(time.time() - start) * 1000:.2f}ms (found {count} datasets)")

start = time.time()
newest = dataset_repo.find_datasets()
print(f"find_datasets(): {(time.time() - start) * 1000:.2f}ms (returned {len(newest)})")

start = time.time()
matches = dataset_repo.find_datasets("a")
print(f"find_datasets('a'): {(time.time() - start) * 1000:.2f}ms (returned {len(matches)})")

if newest:
    start = time.time()
    dataset_repo.find_dataset_by_id(newest[0]["_id"])
    print(f"find_dataset_by_id(): {(time.time() - start) * 1000:.2f}ms")

print("\n--- Test 3: Index Analysis ---")
indexes = list(collection.list_indexes())
for idx in indexes:
    print(f"  - {idx['name']}: {idx.get('key', {})}")

has_created_index = any("createdAt" in str(idx.get("key", {})) for idx in indexes)
if has_created_index:
    print("✓ Index exists: createdAt")
else:
    print("⚠️  MISSING: Index on 'createdAt' (newest-first listing)")
    print("   Run: python -c 'from core import dataset_repo; dataset_repo.ensure_indexes()'")

dataset_repo.close_connection()
