SEARCH_URL = "https://www.google.com/search"
SEARCH_PARAMS = {"udm": "2", "hl": "ko"}
SEARCH_QUALIFIER = "약"

USER_AGENTS = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Edge/120.0.0.0",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_1) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.1 Safari/605.1.15",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
)

BROWSER_EXTRA_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "ko-KR,ko;q=0.9,en;q=0.8",
    "Accept-Encoding": "gzip, deflate",
    "DNT": "1",
    "Connection": "keep-alive",
    "Upgrade-Insecure-Requests": "1",
    "Cache-Control": "no-cache",
    "Referer": "https://www.google.com/",
}

CACHE_TTL_SECONDS = 24 * 60 * 60
CRAWL_INTERVAL_SECONDS = 1.0
URL_PREVIEW_CHARS = 100

# Transparent 1x1 GIF used as a lazy-load stand-in.
PLACEHOLDER_SIGNATURE = "R0lGODlhAQABAIAAAP"
MIN_INLINE_IMAGE_CHARS = 200
MIN_THUMBNAIL_EDGE = 50

BRANDING_MARKERS = (
    "/logos/",
    "google.com/images/branding",
    "gstatic.com/images/icons",
)
THUMBNAIL_HOST_MARKER = "encrypted-tbn"
IMAGE_CONTAINER_SELECTOR = "g-img img"

SCRIPT_IMAGE_PATTERN = r"https?://[^\"'\s]+\.(?:jpg|jpeg|png|gif|webp)"

SCRIPT_DENYLIST = (
    "logo",
    "icon",
    "banner",
    "ads",
    "advertisement",
    "google.com",
    "gstatic.com",
    "googleusercontent.com",
    "youtube.com",
    "ytimg.com",
    "facebook",
    "twitter",
    "1x1",
    "pixel",
    "tracking",
    "analytics",
    "example.com",
    "test.com",
    "placeholder",
    "dummy",
)

SCRIPT_ALLOWLIST = (
    "ctfassets.net",
    "whosaeng.com",
    "k-health.com",
    "namu.wiki",
    "kpanews.co.kr",
    "mfds.go.kr",
    "nedrug.mfds.go.kr",
    "health.kr",
    "pharmnews",
    "medical",
    "pharm",
)

INVALID_IMAGE_HOSTS = (
    "example.com",
    "example.org",
    "example.net",
    "test.com",
    "localhost",
)
