"""
Build Script: Convert report DOCX files into issue JSON and the catalog

This script will:
1. Load report descriptors from CONTENT_DIR (default: content/reports)
2. Convert each descriptor's DOCX (relative to PUBLIC_DIR) to HTML
3. Extract risk issues from the headings and tables
4. Write <OUT_DIR>/<slug>/<version>.json and <OUT_DIR>/index.json

Descriptors whose DOCX is missing are skipped with a warning and listed in
<OUT_DIR>/skipped/skipped_reports.csv. Any other failure aborts the run.

Set PARALLEL=True below to convert documents with MAX_WORKERS processes.
"""

from risk_reports.services.storage_service import ReportStorageService
from risk_reports.api import ReportBuildPipeline, ParallelReportBuildPipeline
from risk_reports.config import get_app_config
from datetime import datetime
import logging
import sys

PARALLEL = False

print("=" * 80)
print("REPORT BUILD: DOCX reports -> issues + catalog")
print("=" * 80)

# === Step 1: Load Configuration ===
print("\n[Step 1] Loading configuration...")
config = get_app_config()
logging.basicConfig(
    level=config.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
print(f"  ✓ Config loaded")
print(f"    - Descriptors: {config.content_dir}")
print(f"    - DOCX root: {config.public_dir}")
print(f"    - Output: {config.out_dir}")

# === Step 2: Initialize Pipeline ===
print("\n[Step 2] Initializing pipeline...")
storage = ReportStorageService(config.out_dir)
if PARALLEL:
    pipeline = ParallelReportBuildPipeline(storage_service=storage, max_workers=config.max_workers)
    print(f"  ✓ ParallelReportBuildPipeline ready ({config.max_workers} workers)")
else:
    pipeline = ReportBuildPipeline(storage_service=storage)
    print(f"  ✓ ReportBuildPipeline ready")

# === Step 3: Build ===
print("\n[Step 3] Building reports...")
start_time = datetime.now()

try:
    stats = pipeline.build(content_dir=config.content_dir, public_dir=config.public_dir)
except Exception as e:
    print(f"  ✗ Build failed: {e}")
    sys.exit(1)

elapsed = (datetime.now() - start_time).total_seconds()

# === Step 4: Display Results ===
print("\n" + "=" * 80)
print("BUILD COMPLETE")
print("=" * 80)
print()
print(f"⏱️  Total Time: {elapsed:.1f} seconds")
print()
print("📊 Statistics:")
print(f"    ✓ Report versions generated: {stats['reports']}")
print(f"    ✓ Issues extracted: {stats['issues']}")
print(f"    ⏭️  Skipped (missing DOCX): {stats['skipped']}")
print()
print(f"💾 Catalog: {storage.index_path} ({len(pipeline.catalog)} entries)")
print()
print("=" * 80)
