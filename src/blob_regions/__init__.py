from blob_regions.exceptions import (  # noqa
    BlobRegionsError,
    UnsupportedOperationError,
    ValidationError,
)
from blob_regions.graph import region_adjacency_graph  # noqa
from blob_regions.ops import boundary_mask, points_in_region  # noqa
from blob_regions.point import NEIGHBOR_OFFSETS_4, Point  # noqa
from blob_regions.region import Region, build_row_index  # noqa

__version__ = "0.1.0"
