"""Firestore collection names (schema-in-code).

Firestore has no DDL or migrations. Collections are created automatically
when you first write a document. These constants are the single source of
truth for where each resource lives.
"""

# Managed resources (CRUD through /api/admin)
COLLECTION_TESTIMONIALS = "testimonials"
COLLECTION_INICIATIVAS = "sectionIniciativas"
COLLECTION_POSTS = "sectionPostsDestaque"
COLLECTION_CANAIS_DENUNCIA = "sectionCanaisDenuncia"
COLLECTION_NAO_SE_CALE = "sectionNaoSeCale"
COLLECTION_PORQUE_ADERIMOS = "sectionPorqueAderimos"
COLLECTION_BANNERS = "banners"
COLLECTION_REPORTS = "reports"
COLLECTION_SECTIONS = "publicContent"

# Read-only public sections (maintained outside this API)
COLLECTION_CARROSSEL = "sectionCarrossel"
COLLECTION_CURSO = "sectionCurso"
COLLECTION_INST_PARCEIRAS = "sectionInstParceiras"
COLLECTION_DEPOIMENTOS = "sectionDepoimentos"
COLLECTION_DOCUMENTOS = "sectionDocumentos"
COLLECTION_SP_POR_TODAS = "sectionSPporTodas"

# Atomic order counters, one document per ordered collection
COLLECTION_COUNTERS = "_counters"
