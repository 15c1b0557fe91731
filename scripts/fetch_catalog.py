import json
import os
import sys
import time

from roadmap.data.client import RoadmapClient
from roadmap.exceptions import RoadmapError

# --- CONFIGURATION ---
# Target courses whose prerequisite trees make up the offline catalog
TARGET_COURSE_IDS = [9, 14, 19, 22, 25, 28]

API_URL = os.environ.get("ROADMAP_API_URL", "http://localhost:3000/api")
POLITE_DELAY = 0.5       # Seconds between requests

# Calculate paths relative to this script file
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
OUTPUT_FILE = os.path.join(BASE_DIR, "data", "fetched_catalog.json")
# ---------------------


def merge(catalog, fetched):
    """Add fetched courses/edges to catalog, skipping ones already present."""
    seen_courses = {c["id"] for c in catalog["courses"]}
    seen_edges = {(e["courseId"], e["prereqCourseId"]) for e in catalog["edges"]}

    for course in fetched["courses"]:
        if course["id"] not in seen_courses:
            seen_courses.add(course["id"])
            catalog["courses"].append(course)
    for edge in fetched["edges"]:
        key = (edge["courseId"], edge["prereqCourseId"])
        if key not in seen_edges:
            seen_edges.add(key)
            catalog["edges"].append(edge)


def run():
    catalog = {"courses": [], "edges": []}
    failures = 0

    print(f"🔗 Base URL: {API_URL}")
    print(f"📂 Saving to: {OUTPUT_FILE}")

    with RoadmapClient(API_URL) as client:
        for course_id in TARGET_COURSE_IDS:
            print(f"   📘 Course {course_id}...", end=" ", flush=True)
            try:
                fetched = client.fetch_catalog(course_id)
            except RoadmapError as e:
                failures += 1
                print(f"[❌ {e}]")
                continue
            merge(catalog, fetched)
            print(f"[✔️ {len(fetched['courses'])} courses]")
            time.sleep(POLITE_DELAY)

    # Keep the file in id order so diffs between runs stay small
    catalog["courses"].sort(key=lambda c: c["id"])

    os.makedirs(os.path.dirname(OUTPUT_FILE), exist_ok=True)
    with open(OUTPUT_FILE, "w", encoding="utf-8") as f:
        json.dump(catalog, f, indent=2)

    print(f"   {len(catalog['courses'])} courses, {len(catalog['edges'])} edges")
    return 1 if failures else 0


if __name__ == "__main__":
    print("🚀 Fetching roadmap catalog")
    print("-" * 60)
    status = run()
    print("-" * 60)
    print(f"✨ Done. Data saved to '{OUTPUT_FILE}'")
    sys.exit(status)
