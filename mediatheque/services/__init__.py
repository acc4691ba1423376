"""
Couche services (cas d'utilisation).

Les services orchestrent la logique du domaine :
- LibraryScanner : scan de la bibliotheque en films et episodes a plat
- ShowAssembler : regroupement des episodes en series et saisons
- TechnicalMetadataCache, RemoteMetadataCache : caches de metadonnees
- ProgressStore : progression de lecture et episode suivant
- LibraryService : scan puis regroupement

Les services dependent des ports definis dans core/, jamais des
implementations concretes des adaptateurs (a l'exception du store JSON).
"""
