from django.apps import AppConfig
import os


class ImageAppConfig(AppConfig):
    name = "image_app"
    default_auto_field = "django.db.models.BigAutoField"

    def ready(self):  # type: ignore[override]
        # When Django autoreloader is enabled, only run in the main (reloaded) process.
        run_main = os.getenv("RUN_MAIN")
        if run_main is not None and run_main != "true":
            return

        if os.getenv("IMAGE_RESOLVER_EAGER", "1").strip().lower() in {"0", "false", "no", "off"}:
            return

        from image_app.services.factory import get_resolver

        get_resolver()
