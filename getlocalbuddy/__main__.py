# File: getlocalbuddy/__main__.py

import uvicorn

from getlocalbuddy.core.config import settings


def main() -> None:
    # 0.0.0.0 so the platform's proxy can reach the container
    uvicorn.run(
        "getlocalbuddy.main:app",
        host=settings.host,
        port=settings.port,
        proxy_headers=True,
        forwarded_allow_ips=settings.forwarded_allow_ips,
    )


if __name__ == "__main__":
    main()
