import uvicorn

from chesstime.config import get_settings


def main():
    settings = get_settings()
    print(f"🚀 Server running on port {settings.port}")
    uvicorn.run("chesstime.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
