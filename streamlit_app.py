"""Streamlit entrypoint for the AI recipe generator."""

from __future__ import annotations

import streamlit as st

from recipe_generator.errors import ValidationError
from recipe_generator.export import (
    EXPORT_MIME_TYPE,
    export_file_name,
    to_clipboard_summary,
    to_plain_text_document,
)
from recipe_generator.generators import get_recipe_generator
from recipe_generator.logging_config import get_logger
from recipe_generator.models import DietaryPreference, Recipe
from recipe_generator.session_state import (
    get_builder,
    get_session,
    initialize_session_state,
)

logger = get_logger(__name__)


def _add_ingredient() -> None:
    """Callback for the ingredient input; runs before the next rerun."""
    builder = get_builder()
    try:
        builder.add_ingredient(st.session_state.ingredient_input)
    except ValidationError as exc:
        st.toast(str(exc), icon="⚠️")
        return
    st.session_state.ingredient_input = ""


def render_ingredients_section() -> None:
    builder = get_builder()
    st.subheader("Your Ingredients")

    input_col, button_col = st.columns([5, 1])
    with input_col:
        st.text_input(
            "Add an ingredient",
            key="ingredient_input",
            placeholder="e.g., chicken, garlic, lemon...",
            on_change=_add_ingredient,
            label_visibility="collapsed",
        )
    with button_col:
        st.button("Add", on_click=_add_ingredient, use_container_width=True)

    if not builder.ingredients:
        st.caption("No ingredients added yet.")
        return

    chip_columns = st.columns(min(len(builder.ingredients), 4))
    for index, ingredient in enumerate(builder.ingredients):
        with chip_columns[index % len(chip_columns)]:
            if st.button(f"✕ {ingredient}", key=f"remove_{ingredient}"):
                builder.remove_ingredient(ingredient)
                logger.info("Ingredient removed by user: %s", ingredient)
                st.rerun()


def render_preferences_section() -> None:
    builder = get_builder()
    options = list(DietaryPreference)
    dietary = st.selectbox(
        "Dietary Preference",
        options,
        index=options.index(builder.dietary_preference),
        format_func=lambda preference: preference.label,
    )
    builder.set_dietary(dietary)

    servings = st.number_input(
        "Number of Servings", min_value=1, step=1, value=builder.servings
    )
    builder.set_servings(servings)


def render_recipe_form() -> None:
    """Render the ingredient form and run a generation when submitted."""
    builder = get_builder()
    session = get_session()

    render_ingredients_section()
    render_preferences_section()

    generate_clicked = st.button(
        "Generate Recipe",
        type="primary",
        disabled=session.is_generating or not builder.ingredients,
        use_container_width=True,
    )
    if not generate_clicked:
        return

    try:
        request = builder.submit()
    except ValidationError as exc:
        st.toast(str(exc), icon="⚠️")
        return

    session.start_generation()
    try:
        with st.spinner("Crafting Your Recipe..."):
            result = get_recipe_generator().generate(request)
    except BaseException:
        # Streamlit stops the script when the user interacts mid-request.
        session.abandon()
        raise
    session.complete(result)

    if result.ok:
        logger.info("Recipe generated: %s", result.recipe.title)
        st.toast("Recipe generated successfully!", icon="✅")
        builder.reset()
        st.rerun()
    else:
        logger.error(
            "Recipe generation failed (%s): %s", result.error.kind.value, result.error.detail
        )
        st.toast(result.error.message, icon="❌")
        st.error(result.error.message)


def render_recipe(recipe: Recipe) -> None:
    st.header(recipe.title)
    time_col, servings_col = st.columns(2)
    time_col.markdown(f"⏱ {recipe.cooking_time}")
    servings_col.markdown(f"👥 {recipe.servings} servings")

    st.subheader("Ingredients")
    st.markdown("\n".join(f"- {ingredient}" for ingredient in recipe.ingredients))

    st.subheader("Cooking Steps")
    st.markdown("\n".join(f"{index}. {step}" for index, step in enumerate(recipe.steps, start=1)))

    if recipe.tips:
        st.subheader("Chef's Tips")
        st.info(recipe.tips)

    if recipe.pairing:
        st.subheader("Wine Pairing")
        st.write(recipe.pairing)

    if recipe.nutrition:
        st.subheader("Nutrition (per serving)")
        columns = st.columns(4)
        columns[0].metric("Calories", recipe.nutrition.calories)
        columns[1].metric("Protein", recipe.nutrition.protein)
        columns[2].metric("Fat", recipe.nutrition.fat)
        columns[3].metric("Carbs", recipe.nutrition.carbs)


def render_recipe_display() -> None:
    """Show the generated recipe with its export actions."""
    session = get_session()
    recipe = session.recipe
    render_recipe(recipe)

    st.markdown("---")
    if st.download_button(
        "Download TXT",
        data=to_plain_text_document(recipe),
        file_name=export_file_name(recipe),
        mime=EXPORT_MIME_TYPE,
    ):
        logger.info("Recipe downloaded as %s", export_file_name(recipe))

    with st.expander("Copy to clipboard"):
        st.code(to_clipboard_summary(recipe), language=None)

    if st.button("Generate Another Recipe"):
        logger.info("User requested a new recipe")
        session.reset()
        get_builder().reset()
        st.rerun()


def main() -> None:
    """Primary Streamlit entrypoint."""
    initialize_session_state()

    st.title("AI Recipe Generator")
    st.caption("Turn your ingredients into delicious recipes with the power of AI")
    logger.info("Application started/refreshed")

    if get_session().recipe is None:
        render_recipe_form()
    else:
        render_recipe_display()


if __name__ == "__main__":
    logger.info("=== Recipe Generator Application Starting ===")
    try:
        main()
    except Exception as exc:  # noqa: BLE001 - top-level Streamlit error handler
        logger.critical("Unhandled exception in main application: %s", exc, exc_info=True)
        st.error(f"A critical error occurred: {exc}")
    logger.info("=== Application execution completed ===")
