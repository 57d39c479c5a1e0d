"""
Shelfman signals.

Signals:
    product_added:
        Sent after a Product is inserted with Catalogue.add_product().

        Kwargs:
            sender: Catalogue class
            catalogue: The Catalogue instance
            product: The Product that was added
            product_id: str — the product id

        Example handler::

            from shelfman.signals import product_added

            def on_product_added(sender, catalogue, product_id, **kwargs):
                logger.info("Added %s to %s", product_id, catalogue.name)

            product_added.connect(on_product_added)

    product_removed:
        Sent after Catalogue.remove_product_by_id() removes a Product.
        Not sent when the id was absent.

        Kwargs:
            sender: Catalogue class
            catalogue: The Catalogue instance
            product: The Product that was removed
            product_id: str — the product id

    batch_added:
        Sent after Catalogue.batch_add_products() commits a batch.
        Rejected batches send nothing.

        Kwargs:
            sender: Catalogue class
            catalogue: The Catalogue instance
            added: list[str] — ids inserted
            skipped: list[str] — ids skipped for having no stock

        Example handler::

            from shelfman.signals import batch_added

            def on_batch_added(sender, catalogue, added, skipped, **kwargs):
                logger.info("Batch: %d added, %d skipped", len(added), len(skipped))

            batch_added.connect(on_batch_added)
"""

from django.dispatch import Signal

product_added = Signal()
product_removed = Signal()
batch_added = Signal()
