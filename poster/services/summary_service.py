import logging
from typing import List, Optional

from poster.models import TextSummary, User
from poster.schemas.text_summary import TextSummaryRequest
from poster.services import naming_service
from poster.services.ownership import get_owned_or_404, update_owned
from poster.services.project_service import ProjectService
from poster.services.xai_service import XAIClient

logger = logging.getLogger("summary_service")

LABEL = "Text summary"
SUMMARY_FAILED = "Failed to generate summary"
DEFAULT_TARGET_WORD_COUNT = 150

SUMMARY_SYSTEM_PROMPT = (
    "You are a helpful AI assistant that creates concise, accurate summaries. "
    "When given a website URL, you MUST use web search to access and read the actual content "
    "from that website before summarizing. Do not make assumptions or invent any material - "
    "only summarize the information actually provided or found through web search. "
    "Stick strictly to the content available. Aim for the target word count specified by the user."
)


def build_summary_prompt(website: Optional[str], text: Optional[str], target_word_count: Optional[int]) -> str:
    words = target_word_count or DEFAULT_TARGET_WORD_COUNT
    if website and text:
        return (
            f"Use web search to access and read the content from this website: {website}\n\n"
            f"After reading the website content, also consider this additional text:\n{text}\n\n"
            "Create a comprehensive summary that incorporates insights from both the website "
            f"and the additional text. Target approximately {words} words."
        )
    if website:
        return (
            f"Use web search to access and read the full content from this website: {website}\n\n"
            f"Create a detailed summary of the website's content. Target approximately {words} words."
        )
    return f"Please summarize the following text in approximately {words} words:\n\n{text}"


def search_parameters(website: Optional[str]) -> dict:
    """Force live search when a website is given, otherwise let the model decide."""
    return {
        "mode": "on" if website else "auto",
        "return_citations": True,
        "sources": [{"type": "web"}],
    }


async def generate_summary(client: XAIClient, website: Optional[str], text: Optional[str], target_word_count: Optional[int]) -> str:
    prompt = build_summary_prompt(website, text, target_word_count)
    summary = await client.chat(
        SUMMARY_SYSTEM_PROMPT,
        prompt,
        model=client.text_model,
        extra_body={"search_parameters": search_parameters(website)},
    )
    return summary or SUMMARY_FAILED


def _clean(value: Optional[str]) -> Optional[str]:
    value = (value or "").strip()
    return value or None


class SummaryService:
    @staticmethod
    async def list_summaries(user: User, project_id: int) -> List[TextSummary]:
        return await TextSummary.filter(project_id=project_id, user_id=user.id).order_by("-updated_at", "-id")

    @staticmethod
    async def create_summary(user: User, data: TextSummaryRequest, client: XAIClient) -> TextSummary:
        """
        Create the record first, then fill in `summary`. A failed completion
        leaves the record in place with `summary` unset.
        """
        project = await ProjectService.require_owned_project(user, data.project_id)
        website = _clean(data.website)
        text = _clean(data.text_to_summarize)

        name = await naming_service.title_for_summary(client, website, text)
        record = await TextSummary.create(
            project=project,
            user=user,
            name=name,
            website=website,
            text_to_summarize=text,
            target_word_count=data.target_word_count,
        )

        summary = await generate_summary(client, website, text, data.target_word_count)
        record.summary = summary
        await record.save(update_fields=["summary", "updated_at"])
        logger.info("Summary %s generated (%s chars)", record.id, len(summary))
        return record

    @staticmethod
    async def update_summary(user: User, summary_id: int, data: TextSummaryRequest, client: XAIClient) -> TextSummary:
        await get_owned_or_404(TextSummary, summary_id, user, LABEL)
        website = _clean(data.website)
        text = _clean(data.text_to_summarize)

        name = await naming_service.title_for_summary(client, website, text)
        summary = await generate_summary(client, website, text, data.target_word_count)

        await update_owned(
            TextSummary,
            summary_id,
            user,
            LABEL,
            name=name,
            website=website,
            text_to_summarize=text,
            target_word_count=data.target_word_count,
            summary=summary,
        )
        return await TextSummary.get(id=summary_id)

    @staticmethod
    async def delete_summary(user: User, summary_id: int) -> None:
        await get_owned_or_404(TextSummary, summary_id, user, LABEL)
        await TextSummary.filter(id=summary_id, user_id=user.id).delete()
