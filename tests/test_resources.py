from __future__ import annotations

import threading

from ofd_graphics.model import DrawParam, DrawParams, MultiMedia, MultiMedias, Res
from ofd_graphics.identifiers import STID
from ofd_graphics.resources import ResourceKind, ResourceRegistry


def test_manifest_is_created_on_first_use() -> None:
    res = Res()
    registry = ResourceRegistry(res)
    assert registry.get(ResourceKind.MEDIA) is None
    assert res.resources == []

    medias = registry.obtain(ResourceKind.MEDIA)

    assert isinstance(medias, MultiMedias)
    assert res.resources == [medias]


def test_manifest_is_registered_only_once() -> None:
    res = Res()
    registry = ResourceRegistry(res)

    first = registry.obtain(ResourceKind.MEDIA)
    second = registry.obtain("media")

    assert first is second
    assert len(res.resources) == 1


def test_each_kind_gets_its_own_manifest() -> None:
    res = Res()
    registry = ResourceRegistry(res)

    medias = registry.obtain(ResourceKind.MEDIA)
    params = registry.obtain(ResourceKind.DRAW_PARAM)

    assert isinstance(params, DrawParams)
    assert res.resources == [medias, params]


def test_concurrent_first_use_creates_single_manifest() -> None:
    res = Res()
    registry = ResourceRegistry(res)
    barrier = threading.Barrier(16)
    seen: list[object] = []

    def worker() -> None:
        barrier.wait()
        seen.append(registry.obtain(ResourceKind.DRAW_PARAM))

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len({id(manifest) for manifest in seen}) == 1
    assert len(res.resources) == 1


def test_register_helpers_add_entries() -> None:
    res = Res()
    registry = ResourceRegistry(res)

    registry.register_media(MultiMedia(id=STID(1), media_file="/Doc_0/Res/res1.png"))
    registry.register_draw_param(DrawParam(obj_id=STID(2)))

    assert len(registry.get(ResourceKind.MEDIA)) == 1
    assert 2 in registry.get(ResourceKind.DRAW_PARAM).items
