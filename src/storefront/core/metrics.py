from prometheus_client import Counter, Gauge, Histogram

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total number of HTTP requests",
    ["method", "path", "status_code"],
)

SEARCH_COUNT = Counter(
    "catalog_searches_total",
    "Total number of catalog searches",
    ["outcome"],
)

SEARCH_DURATION = Histogram(
    "catalog_search_duration_seconds",
    "Duration of catalog searches in seconds",
)

CATALOG_PRODUCTS = Gauge(
    "catalog_products",
    "Number of products in the loaded catalog",
    ["category"],
)
