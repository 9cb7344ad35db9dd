"""Fleet configuration models (zones, clusters, chart coordinates)."""

from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from pydantic import AliasChoices, BaseModel, Field, field_validator

# Shapes seen in the wild: absent, a list of strings, a mapping. Anything else
# is carried through untouched.
IgnoreDifferences = Optional[Union[List[str], Dict[str, Any], Any]]


class ClusterSpec(BaseModel):
    """One cluster entry: which chart to deploy and how."""

    name: str = ""
    chart: str = ""
    chart_version: str = Field(default="", alias="chartVersion")
    values_files: List[str] = Field(default_factory=list, alias="valuesFiles")
    autosync: bool = False
    git_repo: str = Field(default="", alias="gitRepo")
    helm_repo: str = Field(default="", alias="helmRepo")
    sync_options: List[str] = Field(default_factory=list, alias="syncOptions")
    ignore_differences: IgnoreDifferences = Field(default=None, alias="ignoreDifferences")

    class Config:
        populate_by_name = True
        frozen = True
        extra = "ignore"

    @field_validator("values_files", "sync_options", mode="before")
    @classmethod
    def _null_list(cls, value):
        return [] if value is None else value

    @field_validator("name", "chart", "chart_version", "git_repo", "helm_repo", mode="before")
    @classmethod
    def _null_str(cls, value):
        if value is None:
            return ""
        # chartVersion: 1.2 parses as a float in YAML
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("autosync", mode="before")
    @classmethod
    def _null_bool(cls, value):
        return False if value is None else value


class ZoneSpec(BaseModel):
    """A named group of clusters."""

    alias: str = ""
    description: str = ""
    endpoint: str = ""
    clusters: Dict[str, ClusterSpec] = Field(
        default_factory=dict, validation_alias=AliasChoices("Clusters", "clusters")
    )

    class Config:
        frozen = True
        extra = "ignore"

    @field_validator("clusters", mode="before")
    @classmethod
    def _null_clusters(cls, value):
        return {} if value is None else value

    @field_validator("alias", "description", "endpoint", mode="before")
    @classmethod
    def _null_str(cls, value):
        return "" if value is None else value


class FleetSpec(BaseModel):
    """Root of the fleet configuration."""

    zones: Dict[str, ZoneSpec] = Field(
        default_factory=dict, validation_alias=AliasChoices("zones", "Zones")
    )

    class Config:
        frozen = True
        extra = "ignore"

    @field_validator("zones", mode="before")
    @classmethod
    def _null_zones(cls, value):
        return {} if value is None else value

    def iter_clusters(self) -> Iterator[Tuple[str, str, ClusterSpec]]:
        """Yield (zone name, cluster key, cluster) for every cluster."""
        for zone_name, zone in self.zones.items():
            for cluster_name, cluster in zone.clusters.items():
                yield zone_name, cluster_name, cluster

    @property
    def cluster_count(self) -> int:
        return sum(len(zone.clusters) for zone in self.zones.values())
