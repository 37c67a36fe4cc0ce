from io import StringIO

from django.core.management import call_command

from .fakes import FakeFetcher
from .fixtures import INLINE_IMAGE_HTML


def test_resolve_images_command_prints_sources(mocker, resolver_factory):
    fetcher = FakeFetcher(INLINE_IMAGE_HTML)
    resolver = resolver_factory(fetcher)
    mocker.patch(
        "image_app.management.commands.resolve_images.get_resolver",
        return_value=resolver,
    )
    out = StringIO()

    call_command("resolve_images", "타이레놀", "타이레놀", stdout=out)

    output = out.getvalue()
    assert "size: 0" in output
    assert "[타이레놀] source=crawled image=https://cdn.pharmcdn.net/tylenol.jpg" in output
    assert "[타이레놀] source=cache image=https://cdn.pharmcdn.net/tylenol.jpg" in output
    assert fetcher.calls == ["타이레놀"]


def test_resolve_images_status_only_does_not_crawl(mocker, resolver_factory):
    fetcher = FakeFetcher(INLINE_IMAGE_HTML)
    resolver = resolver_factory(fetcher)
    resolver.cache.put("부루펜", None)
    mocker.patch(
        "image_app.management.commands.resolve_images.get_resolver",
        return_value=resolver,
    )
    out = StringIO()

    call_command("resolve_images", "타이레놀", "--status-only", stdout=out)

    assert "size: 1" in out.getvalue()
    assert "부루펜: - (0 minutes)" in out.getvalue()
    assert fetcher.calls == []


def test_resolve_images_clear_first(mocker, resolver_factory):
    resolver = resolver_factory(FakeFetcher(None))
    resolver.cache.put("부루펜", None)
    mocker.patch(
        "image_app.management.commands.resolve_images.get_resolver",
        return_value=resolver,
    )
    out = StringIO()

    call_command("resolve_images", "--clear-first", "--status-only", stdout=out)

    assert "Cache cleared: 1 entries deleted" in out.getvalue()
    assert "size: 0" in out.getvalue()
