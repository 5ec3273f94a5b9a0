from dependency_injector import containers, providers

from nftindexer.catalog.wearables import load_wearable_catalog
from nftindexer.config import Settings
from nftindexer.db.session import build_engine, build_session_factory
from nftindexer.land.geometry import load_land_map
from nftindexer.reconcile.addresses import get_addresses
from nftindexer.reconcile.batch import BatchProcessor
from nftindexer.reconcile.category import build_default_resolver
from nftindexer.reconcile.reconciler import TransferReconciler
from nftindexer.reconcile.specializers import build_default_registry


class Container(containers.DeclarativeContainer):
    settings = providers.Singleton(Settings)

    engine = providers.Singleton(
        build_engine,
        database_url=settings.provided.database_url,
        echo=settings.provided.debug,
    )

    session_factory = providers.Singleton(
        build_session_factory,
        engine=engine,
    )

    addresses = providers.Singleton(get_addresses, settings=settings)

    land_map = providers.Singleton(load_land_map, path=settings.provided.land_map_path)
    wearable_catalog = providers.Singleton(load_wearable_catalog, path=settings.provided.wearable_catalog_path)

    specializers = providers.Singleton(
        build_default_registry,
        land_map=land_map,
        catalog=wearable_catalog,
    )

    category_resolver = providers.Singleton(
        build_default_resolver,
        addresses=addresses,
        wearable_collections=settings.provided.wearable_collections,
    )

    reconciler = providers.Singleton(
        TransferReconciler,
        addresses=addresses,
        specializers=specializers,
        zero_address=settings.provided.zero_address,
    )

    batch_processor = providers.Singleton(
        BatchProcessor,
        reconciler=reconciler,
        resolver=category_resolver,
    )
