import time

from django.core.management.base import BaseCommand

from image_app.common.utils import preview
from image_app.services.factory import get_resolver


class Command(BaseCommand):
    help = "Show image cache status and resolve medicine names through the shared crawl queue"

    def add_arguments(self, parser):
        parser.add_argument("names", nargs="*", help="Medicine names to resolve, in order")
        parser.add_argument(
            "--status-only",
            action="store_true",
            help="Print the cache status and exit",
        )
        parser.add_argument(
            "--clear-first",
            action="store_true",
            help="Clear the image cache before resolving",
        )

    def handle(self, *args, **options):
        names: list[str] = [str(n) for n in options["names"]]
        resolver = get_resolver()

        if options.get("clear_first"):
            deleted = resolver.clear_cache()
            self.stdout.write(f"Cache cleared: {deleted} entries deleted")

        entries = resolver.cache_snapshot()
        self.stdout.write("=== Cache status ===")
        self.stdout.write(f"  size: {len(entries)}")
        for entry in entries:
            image = entry.url_preview or "-"
            self.stdout.write(f"  {entry.name}: {image} ({entry.age_minutes} minutes)")
        self.stdout.write("")

        if options.get("status_only"):
            return

        for name in names:
            start = time.perf_counter()
            try:
                resolution = resolver.resolve(name)
            except Exception as exc:
                msg = str(exc) or repr(exc)
                self.stdout.write(f"[{name}] ERROR: {msg}")
                continue
            elapsed = time.perf_counter() - start
            self.stdout.write(
                f"[{name}] source={resolution.source.value} "
                f"image={preview(resolution.image_url) or 'null'} ({elapsed:.2f}s)"
            )
