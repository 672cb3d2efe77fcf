from itertools import combinations

from magpie.rect import Rect
from magpie.shadow_atlas import ATLAS_SIZE, AtlasRegion, ShadowMapAtlas


def test_first_allocation_is_top_left_half():
    atlas = ShadowMapAtlas()
    region = atlas.allocate(1)
    assert region == AtlasRegion(Rect(0, 0, ATLAS_SIZE // 2, ATLAS_SIZE // 2))


def test_quality_zero_never_allocates():
    atlas = ShadowMapAtlas()
    assert atlas.allocate(0) is None
    assert atlas.regions() == []


def test_quality_one_leaves_bottom_right_free():
    atlas = ShadowMapAtlas()
    regions = [atlas.allocate(1) for _ in range(3)]
    assert all(r is not None for r in regions)
    assert atlas.allocate(1) is None
    half = ATLAS_SIZE // 2
    corner = Rect(half, half, half, half)
    assert not any(r.area.intersects(corner) for r in regions)


def test_allocations_never_overlap():
    atlas = ShadowMapAtlas()
    for _ in range(10):
        atlas.adaptive_alloc(2, 6)
    regions = atlas.regions()
    for a, b in combinations(regions, 2):
        assert not a.area.intersects(b.area)


def test_adaptive_alloc_degrades_quality():
    atlas = ShadowMapAtlas()
    for _ in range(3):
        atlas.allocate(1)
    region = atlas.adaptive_alloc(1, 5)
    assert region is not None
    assert region.area.w < ATLAS_SIZE // 2


def test_adaptive_alloc_gives_up_at_worst_quality():
    atlas = ShadowMapAtlas()
    assert atlas.adaptive_alloc(3, 3) is None
    assert atlas.adaptive_alloc(0, 1) is None


def test_clear_frees_space():
    atlas = ShadowMapAtlas()
    first = atlas.allocate(1)
    atlas.clear()
    assert atlas.regions() == []
    assert atlas.allocate(1) == first


def test_regions_returns_copy():
    atlas = ShadowMapAtlas()
    atlas.allocate(2)
    atlas.regions().clear()
    assert len(atlas.regions()) == 1


def test_custom_size():
    atlas = ShadowMapAtlas(size=64)
    region = atlas.allocate(2)
    assert region.area.size() == (16, 16)