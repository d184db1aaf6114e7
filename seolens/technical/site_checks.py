from ..models import Finding, STATUS_ERROR, STATUS_SUCCESS

SSL_CERTIFICATE = "SSL Certificate"


def check_https_usage(url: str) -> Finding:
    # Only the scheme of the analyzed URL is inspected, never the certificate
    if url.lower().startswith("https://"):
        return Finding(name=SSL_CERTIFICATE, value="Valid", status=STATUS_SUCCESS)
    return Finding(
        name=SSL_CERTIFICATE,
        value="Not using HTTPS",
        status=STATUS_ERROR,
        message="Site is not using HTTPS",
    )
