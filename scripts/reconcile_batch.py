"""Reconcile one batch of decoded transfer logs into the database.

Usage:
    PYTHONPATH=src python scripts/reconcile_batch.py batch.json

batch.json holds a BatchInput: {"logs": [...], "coordinates": {...},
"token_uris": {...}, "ens_subdomains": {...}}.
"""

import asyncio
import logging
import sys
from pathlib import Path

from nftindexer.config import settings

logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)-5s %(name)s - %(message)s")
logger = logging.getLogger("reconcile_batch")
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


async def main(path: Path) -> None:
    from nftindexer.container import Container
    from nftindexer.runner import BatchInput, run_batch

    container = Container()
    batch = BatchInput.model_validate_json(path.read_text())
    logger.info("Loaded %d transfer logs from %s", len(batch.logs), path)

    session_factory = container.session_factory()
    async with session_factory() as session:
        stats = await run_batch(session, container.batch_processor(), batch)

    print(f"applied={stats['applied']} skipped={stats['skipped']} anomalies={stats['anomalies']} total={stats['total']}")
    await container.engine().dispose()


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(1)
    asyncio.run(main(Path(sys.argv[1])))
