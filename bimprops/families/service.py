"""Consumer-facing operations for browsing and editing family properties."""

import posixpath
from typing import List, Optional

from bimprops.config import Config
from bimprops.config_docs import MANIFEST_SUFFIX, OPTIONS_FILE_NAME
from bimprops.editing.pipeline import EditPipeline
from bimprops.exceptions import (
    BimPropsError,
    FamilyNotFoundError,
    FamilyValidationError,
    OptionsFileNotFoundError,
    StoreIOError,
    StoreNotFoundError,
)
from bimprops.families.aggregator import CategoryView, filter_view, resolve, view
from bimprops.logger import Logger, session_logger
from bimprops.mapping.manifest_mapper import parse_manifest
from bimprops.models import EditResult, FamilyManifest, FamilyView, ResolvedFamily
from bimprops.options.cache import OptionCache
from bimprops.storage import FileTextStore
from bimprops.storage.base import TextStoreBase
from bimprops.validation.validator import FamilyValidator


class FamilyService:
    """Loads validated family views and routes property edits."""

    def __init__(
        self,
        store: TextStoreBase,
        families_dir: str,
        option_cache: OptionCache,
        edit_pipeline: EditPipeline,
        logger: Optional[Logger] = None,
        validator: Optional[FamilyValidator] = None,
    ) -> None:
        """
        Initialize the family service.

        Args:
            store: Store holding the family manifests
            families_dir: Store path of the directory of manifests
            option_cache: Cache of the shared option groups
            edit_pipeline: Pipeline that writes property edits
            logger: Logger instance
            validator: Validator applied before a view is returned
        """
        self.store = store
        self.families_dir = families_dir
        self.option_cache = option_cache
        self.edit_pipeline = edit_pipeline
        self.logger = logger or session_logger
        self.validator = validator or FamilyValidator()

    @classmethod
    def from_config(cls, logger: Optional[Logger] = None) -> "FamilyService":
        """Build a file-backed service from environment configuration.

        Raises:
            OptionsFileNotFoundError: If no shared options file can be located
        """
        logger = logger or session_logger
        options_file = Config.get_options_file()
        if options_file is None:
            raise OptionsFileNotFoundError(str(Config.get_data_dir() / "*" / OPTIONS_FILE_NAME))

        families_dir = Config.get_families_dir(options_file)
        store = FileTextStore(logger=logger)
        cache = OptionCache(store, str(options_file), logger=logger, current_locale=Config.get_locale())
        pipeline = EditPipeline(store, str(options_file), cache, logger=logger)

        logger.info(
            "Family service configured",
            options_file=str(options_file),
            families_dir=str(families_dir),
        )
        return cls(store, str(families_dir), cache, pipeline, logger=logger)

    def manifest_path(self, family_id: str) -> str:
        return posixpath.join(self.families_dir, f"{family_id}{MANIFEST_SUFFIX}")

    def load_manifest(self, family_id: str) -> FamilyManifest:
        """
        Read and parse the manifest of one family.

        Raises:
            FamilyNotFoundError: If the id is unusable or no manifest exists
            DocumentFormatError: If the manifest is not valid JSON
            StoreIOError: If the store fails to read the manifest
        """
        if not family_id or "/" in family_id or "\\" in family_id:
            raise FamilyNotFoundError(family_id)

        path = self.manifest_path(family_id)
        try:
            text = self.store.read_text(path)
        except StoreNotFoundError as e:
            self.logger.warning("Family manifest not found", family_id=family_id, path=path)
            raise FamilyNotFoundError(family_id, path) from e
        except StoreIOError as e:
            raise StoreIOError("read", path, e.reason, details={"family_id": family_id}) from e

        return parse_manifest(text, path)

    def load_family(self, family_id: str) -> ResolvedFamily:
        """Load a manifest and resolve its option groups without validating."""
        manifest = self.load_manifest(family_id)
        return resolve(manifest, self.option_cache.get())

    def load_family_view(self, family_id: str) -> FamilyView:
        """
        Load a family and return its category-ordered properties.

        Raises:
            FamilyNotFoundError: If no manifest exists for the id
            FamilyValidationError: If the family fails structural validation
        """
        resolved = self.load_family(family_id)

        result = self.validator.validate(resolved)
        if not result.is_valid:
            self.logger.error(
                "Family failed validation",
                family_id=family_id,
                errors=len(result.errors),
                missing_groups=resolved.missing_group_ids,
            )
            raise FamilyValidationError(family_id, result)

        categories = view(resolved)
        family_view = FamilyView(manifest=resolved.manifest, categories=categories)
        self.logger.info(
            "Family view loaded",
            family_id=family_id,
            categories=len(categories),
            properties=family_view.property_count,
        )
        return family_view

    def search(self, family_id: str, search_text: str) -> CategoryView:
        """Load a family view and keep only categories/properties matching search_text."""
        return filter_view(self.load_family_view(family_id).categories, search_text)

    def edit_property(self, option_group_id: str, property_id: str, text: str) -> EditResult:
        """Write a new value for one property; see EditPipeline.apply_edit."""
        return self.edit_pipeline.apply_edit(option_group_id, property_id, text)

    def list_families(self) -> List[FamilyManifest]:
        """
        Load every readable manifest in the families directory.

        Files that cannot be read or parsed are skipped and logged.
        """
        families: List[FamilyManifest] = []
        for path in self.store.list_paths(self.families_dir, MANIFEST_SUFFIX):
            try:
                families.append(parse_manifest(self.store.read_text(path), path))
            except BimPropsError as e:
                self.logger.error("Failed to load family manifest", path=path, error=str(e))
        return families
