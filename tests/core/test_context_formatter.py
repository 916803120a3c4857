"""
Test suite for context formatting.

System role: Verification of prompt context rendering
"""

from portfolio_assistant.core.context_formatter import format_context


class TestFormatContext:
    """Test suite for format_context."""

    def test_empty_input_should_give_empty_string(self) -> None:
        assert format_context([]) == ""

    def test_should_keep_input_order(self, project_document, general_document) -> None:
        """Test blocks follow rank order regardless of content type."""
        # Arrange
        documents = [
            general_document("About Jordan", "Product designer based in Austin.", similarity=0.8),
            project_document("Swyvvl", similarity=0.75),
            general_document("Skills", "Figma, React, TypeScript.", similarity=0.7),
        ]

        # Act
        context = format_context(documents)

        # Assert
        about = context.index("[About Jordan - Match: 80.0%]")
        swyvvl = context.index("[PROJECT: Swyvvl - Match: 75.0%]")
        skills = context.index("[Skills - Match: 70.0%]")
        assert about < swyvvl < skills

    def test_project_block_should_include_details(self, project_document) -> None:
        # Arrange
        document = project_document(
            "Modern Day Sniper",
            similarity=0.99,
            slug="modern-day-sniper",
            summary="Brand identity for an outdoor label.",
            features=["Custom storefront", "Brand guidelines"],
            tools=["Figma", "Shopify"],
            tags=["branding"],
            url="https://moderndaysniper.com",
        )

        # Act
        context = format_context([document])

        # Assert
        assert context.startswith("[PROJECT: Modern Day Sniper - Match: 99.0%]")
        assert "Slug: modern-day-sniper" in context
        assert "Brand identity for an outdoor label." in context
        assert "Key Features:\n- Custom storefront\n- Brand guidelines" in context
        assert "Tools: Figma, Shopify" in context
        assert "Tags: branding" in context
        assert "Project URL: https://moderndaysniper.com" in context

    def test_blocks_should_be_separated_by_blank_lines(self, general_document) -> None:
        # Arrange
        documents = [general_document("A", "one"), general_document("B", "two")]

        # Act
        context = format_context(documents)

        # Assert
        assert context.count("\n\n") == 1
