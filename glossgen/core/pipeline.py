"""
Glossary generation pipeline.

records -> GlossaryIndex -> sort -> HtmlPageRenderer -> page sink

The record source is read to completion before anything is rendered. Pages
are rendered and written one at a time: every term page in sorted order,
then the index page.
"""
from datetime import datetime
from typing import Optional
import logging
import uuid

from .cross_linker import CrossLinker
from .exceptions import ConfigurationError, GlossarySystemError, PipelineError
from .glossary_index import GlossaryIndex
from .interfaces import IRecordSource, IPageSink, IProgressCallback, NullProgressCallback
from .models import (
    DuplicatePolicy, GenerationJob, GenerationStatus, RenderedPage, page_name_for,
    DEFAULT_INDEX_NAME, DEFAULT_INDEX_TITLE, DEFAULT_SEPARATORS
)
from .tokenizer import Tokenizer
from ..formatters.html_renderer import HtmlPageRenderer


logger = logging.getLogger(__name__)


class GlossaryPipeline:
    """Builds a glossary index from a record source and writes its pages."""

    def __init__(
        self,
        separators: str = DEFAULT_SEPARATORS,
        duplicate_policy: DuplicatePolicy = DuplicatePolicy.REJECT,
        title: str = DEFAULT_INDEX_TITLE,
        heading_color: str = "red"
    ):
        self.tokenizer = Tokenizer.from_separators(separators)
        self.duplicate_policy = DuplicatePolicy.from_value(duplicate_policy)
        self.title = title
        self.heading_color = heading_color

    @classmethod
    def from_config(cls, config) -> 'GlossaryPipeline':
        """Create a pipeline from an ``AppConfig``."""
        return cls(
            separators=config.tokenizer.separators,
            duplicate_policy=config.glossary.duplicate_policy,
            title=config.output.title,
            heading_color=config.output.heading_color,
        )

    def build_index(self, source: IRecordSource) -> GlossaryIndex:
        """
        Read every record and return a frozen index.

        Raises:
            DuplicateTermError: On a repeated term when the policy is REJECT
            RecordReadError: If the source cannot be read
        """
        index = GlossaryIndex.from_records(source.records(), self.duplicate_policy)
        logger.info(f"Loaded {len(index)} terms")
        return index

    def create_renderer(self, index: GlossaryIndex, index_name: str) -> HtmlPageRenderer:
        return HtmlPageRenderer(
            CrossLinker(index, self.tokenizer),
            index_name=index_name,
            title=self.title,
            heading_color=self.heading_color,
        )

    def generate(
        self,
        source: IRecordSource,
        sink: IPageSink,
        index_name: str = DEFAULT_INDEX_NAME,
        progress_callback: Optional[IProgressCallback] = None
    ) -> GenerationJob:
        """
        Generate the whole glossary.

        Sink failures are not retried: the run stops at the first page that
        cannot be written and pages already written are left in place.

        Returns:
            Finished GenerationJob

        Raises:
            GlossarySystemError: Any glossary, parser or output error
            PipelineError: Unexpected failures
        """
        callback = progress_callback or NullProgressCallback()
        job = GenerationJob(job_id=str(uuid.uuid4()), index_name=index_name)
        job.started_at = datetime.now()

        try:
            index = self.build_index(source)
            self.check_page_names(index, index_name)
            job.total_terms = len(index)
            job.terms = index.sorted_terms()
            job.status = GenerationStatus.IN_PROGRESS
            callback.on_start(job)

            renderer = self.create_renderer(index, index_name)
            for term in job.terms:
                page = renderer.render_term(term)
                job.links_created += renderer.cross_linker.last_link_count
                self._write(sink, job, callback, page)
            self._write(sink, job, callback, renderer.render_index(job.terms))

            job.status = GenerationStatus.COMPLETED
            job.completed_at = datetime.now()
            callback.on_complete(job)

            logger.info(
                f"Complete: {job.pages_written} pages, {job.links_created} links, "
                f"{job.duration:.2f}s"
            )
            return job

        except GlossarySystemError as e:
            self._fail(job, callback, e)
            raise
        except Exception as e:
            self._fail(job, callback, e)
            raise PipelineError(f"Pipeline failed: {e}", stage="generate") from e

    @staticmethod
    def check_page_names(index: GlossaryIndex, index_name: str) -> None:
        """
        Reject a term whose page would share the index page name.

        Raises:
            ConfigurationError: If some term page is named ``index_name``
        """
        for term in index:
            if page_name_for(term) == index_name:
                raise ConfigurationError(
                    f"Term '{term}' would overwrite the index page {index_name}",
                    component="pipeline",
                    term=term,
                )

    @staticmethod
    def _write(sink: IPageSink, job: GenerationJob, callback: IProgressCallback, page: RenderedPage) -> None:
        sink.write_page(page)
        job.pages_written += 1
        job.written_pages.append(page.name)
        callback.on_page_written(job, page)

    @staticmethod
    def _fail(job: GenerationJob, callback: IProgressCallback, error: Exception) -> None:
        job.status = GenerationStatus.FAILED
        job.completed_at = datetime.now()
        job.error = str(error)
        logger.error(f"Generation failed after {job.pages_written} pages: {error}")
        callback.on_error(job, error)
