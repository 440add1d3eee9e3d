"""Gene feature: argument translation, loaders contract and service."""

from gene_service.features.genes.loaders import GeneLoaders, UpstreamResponse
from gene_service.features.genes.schemas import FullGene, GeneStub, GeneView
from gene_service.features.genes.service import GeneService

__all__ = [
    "FullGene",
    "GeneLoaders",
    "GeneService",
    "GeneStub",
    "GeneView",
    "UpstreamResponse",
]
