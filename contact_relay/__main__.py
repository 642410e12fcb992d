import uvicorn

from .settings import settings


def main() -> None:
    uvicorn.run(
        "contact_relay.app:app",
        host=settings.host,
        port=settings.port,
        root_path=settings.root_path,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
        forwarded_allow_ips="*",
    )


if __name__ == "__main__":
    main()
