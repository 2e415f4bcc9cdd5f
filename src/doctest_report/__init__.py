"""HTML report assembly for documented API test runs.

Doc items collected while running API tests are rendered into one HTML report
per test class plus an index page linking all reports in the output directory.
"""

__all__: list[str] = [
    "cli",
    "config",
    "file_helper",
    "html_items",
    "index_renderer",
    "items",
    "json_helper",
    "minio_store",
    "renderer",
]
