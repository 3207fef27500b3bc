"""WordPress 기준 테이블 목록."""

# 단일 사이트 코어 테이블
CORE_TABLES: tuple[str, ...] = (
    "wp_commentmeta",
    "wp_comments",
    "wp_links",
    "wp_options",
    "wp_postmeta",
    "wp_posts",
    "wp_terms",
    "wp_termmeta",
    "wp_term_relationships",
    "wp_term_taxonomy",
    "wp_usermeta",
    "wp_users",
)

# 멀티사이트 추가 테이블
MULTISITE_TABLES: tuple[str, ...] = (
    "wp_blogs",
    "wp_blogmeta",
    "wp_blog_versions",
    "wp_registration_log",
    "wp_signups",
    "wp_site",
    "wp_sitemeta",
)

# 권장 charset 및 변환이 필요한 charset
RECOMMENDED_CHARSET = "utf8mb4"
LEGACY_CHARSETS: tuple[str, ...] = ("latin1", "utf8")
KNOWN_CHARSETS: tuple[str, ...] = (RECOMMENDED_CHARSET,) + LEGACY_CHARSETS

# 확인할 wp_options 항목
SITE_URL_OPTIONS: tuple[str, ...] = ("siteurl", "home")

# 표 출력 컬럼
OPTIONS_COLUMNS: tuple[str, ...] = ("option_name", "option_value")
BLOGS_COLUMNS: tuple[str, ...] = ("blog_id", "site_id", "domain", "path")
