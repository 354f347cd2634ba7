# run_dev.py
import os


# Carga .env si existe
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv(".env")


APP_MODULE = os.getenv("APP_MODULE", "minitwit.main:app")


def _reload_flag() -> bool:
    reload_env = os.getenv("RELOAD")
    if reload_env is None:
        return True
    return reload_env.strip() in ("1", "true", "True", "yes", "on")


def main():
    import uvicorn
    from minitwit.core.config import settings

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    reload_flag = _reload_flag()

    print(f"🔗 API local: http://127.0.0.1:{port}")
    print(f"🌀 reload={'ON' if reload_flag else 'OFF'}")

    uvicorn.run(
        APP_MODULE,
        host=host,
        port=port,
        reload=reload_flag,
        reload_dirs=["minitwit"],
        timeout_keep_alive=30,
        timeout_graceful_shutdown=15,
        log_level=settings.LOG_LEVEL,
        lifespan="on",
    )


if __name__ == "__main__":
    main()
