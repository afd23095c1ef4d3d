from django.utils.functional import cached_property


class _Constants:
    @cached_property
    def MULTIDOMAIN_CONFIG(self) -> str:
        return "MULTIDOMAIN_CONFIG"

    @cached_property
    def HOME_URL(self) -> str:
        return "HOME_URL"

    @cached_property
    def DOMAINS(self) -> str:
        return "DOMAINS"

    @cached_property
    def IGNORE_DEFAULT_PORTS(self) -> str:
        return "IGNORE_DEFAULT_PORTS"

    @cached_property
    def ADD_CANONICAL(self) -> str:
        return "ADD_CANONICAL"

    @cached_property
    def LOW_MEMORY(self) -> str:
        return "LOW_MEMORY"

    @cached_property
    def OVERRIDE_HOST_HEADER(self) -> str:
        return "OVERRIDE_HOST_HEADER"

    @cached_property
    def DOMAIN_RESOLVER(self) -> str:
        return "DOMAIN_RESOLVER"

    @cached_property
    def OPTION_STORE(self) -> str:
        return "OPTION_STORE"

    @cached_property
    def CACHE_ALIAS(self) -> str:
        return "CACHE_ALIAS"

    @cached_property
    def ADMIN_URL_PATTERN(self) -> str:
        return "ADMIN_URL_PATTERN"

    @cached_property
    def REDIRECT_EXCLUDE_PATTERN(self) -> str:
        return "REDIRECT_EXCLUDE_PATTERN"

    @cached_property
    def REWRITE_CONTENT_TYPES(self) -> str:
        return "REWRITE_CONTENT_TYPES"

    @cached_property
    def SEND_CORS_HEADERS(self) -> str:
        return "SEND_CORS_HEADERS"

    # --- Persisted option names ---
    @cached_property
    def OPTION_DOMAINS(self) -> str:
        return "multidomain-domains"

    @cached_property
    def OPTION_IGNORE_DEFAULT_PORTS(self) -> str:
        return "multidomain-ignore-default-ports"

    @cached_property
    def OPTION_ADD_CANONICAL(self) -> str:
        return "multidomain-add-canonical"

    # --- Protocols ---
    @cached_property
    def PROTOCOL_HTTP(self) -> str:
        return "http"

    @cached_property
    def PROTOCOL_HTTPS(self) -> str:
        return "https"

    @cached_property
    def PROTOCOL_AUTO(self) -> str:
        return "auto"

    @cached_property
    def PROTOCOLS(self) -> tuple:
        return (self.PROTOCOL_HTTP, self.PROTOCOL_HTTPS, self.PROTOCOL_AUTO)

    @cached_property
    def DEFAULT_PORTS(self) -> tuple:
        return (80, 443)

    @cached_property
    def HREFLANG_DEFAULT(self) -> str:
        return "x-default"

    @cached_property
    def BODY_CLASS_PREFIX(self) -> str:
        return "multidomain-"


constants = _Constants()
