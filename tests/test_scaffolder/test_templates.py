"""Tests for the Kotlin template renderer (alfred.scaffolder.templates).

Covers:
- Every packaged template renders with its documented context
- Conditional imports and interface lists
- Missing slots and missing templates raise RenderError
- render_to_file writes nothing when rendering fails
"""

from __future__ import annotations

from pathlib import Path

import pytest

from alfred.errors import RenderError
from alfred.scaffolder import templates
from alfred.scaffolder.templates import TemplateRenderer

pytestmark = pytest.mark.unit


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Packaged templates
# ---------------------------------------------------------------------------


class TestPackagedTemplates:
    def test_all_templates_shipped(self, renderer: TemplateRenderer):
        shipped = sorted(p.name for p in renderer.template_dir.glob("*.j2"))
        assert shipped == sorted(
            [
                templates.ABSTRACT_VIEWSTATE_VIEWMODEL,
                templates.ANDROID_PLATFORM_VIEWMODEL,
                templates.ATOMICJOB,
                templates.COMPOSE,
                templates.IOS_PLATFORM_VIEWMODEL,
                templates.UISTATE,
                templates.VIEWSTATE_VIEWMODEL,
            ]
        )

    @pytest.mark.parametrize(
        "template",
        [
            templates.UISTATE,
            templates.ATOMICJOB,
            templates.ANDROID_PLATFORM_VIEWMODEL,
            templates.IOS_PLATFORM_VIEWMODEL,
        ],
    )
    def test_package_only_templates(self, renderer: TemplateRenderer, template: str):
        text = renderer.render(template, {"package": "com.example.app"})
        assert text.splitlines()[0] == "package com.example.app"

    def test_platform_viewmodels_are_actual(self, renderer: TemplateRenderer):
        android = renderer.render(templates.ANDROID_PLATFORM_VIEWMODEL, {"package": "p"})
        ios = renderer.render(templates.IOS_PLATFORM_VIEWMODEL, {"package": "p"})
        assert "actual abstract class PlatformViewModel" in android
        assert "androidx.lifecycle.ViewModel" in android
        assert "actual abstract class PlatformViewModel" in ios
        assert "MainScope" in ios

    def test_base_viewmodel_without_koin(self, renderer: TemplateRenderer):
        text = renderer.render(
            templates.ABSTRACT_VIEWSTATE_VIEWMODEL,
            {"package": "com.example.app", "interfaces": "", "imports": []},
        )
        assert "PlatformViewModel() {" in text
        assert "Koin" not in text
        assert "expect abstract class PlatformViewModel" in text

    def test_base_viewmodel_with_koin(self, renderer: TemplateRenderer):
        text = renderer.render(
            templates.ABSTRACT_VIEWSTATE_VIEWMODEL,
            {
                "package": "com.example.app",
                "interfaces": ", KoinComponent",
                "imports": ["org.koin.core.component.KoinComponent"],
            },
        )
        assert "PlatformViewModel(), KoinComponent {" in text
        assert "import org.koin.core.component.KoinComponent\n" in text

    def test_feature_viewmodel(self, renderer: TemplateRenderer):
        text = renderer.render(
            templates.VIEWSTATE_VIEWMODEL,
            {
                "name": "LoginViewModel",
                "package": "com.example.app.feature.login",
                "uistate_package": "com.example.app",
                "atomicjob_package": "com.example.util",
                "viewstate_viewmodel_package": "com.example.app.base",
            },
        )
        lines = text.splitlines()
        assert lines[0] == "package com.example.app.feature.login"
        assert "import com.example.util.AtomicJob" in lines
        assert "import com.example.app.UiState" in lines
        assert "import com.example.app.base.ViewStateViewModel" in lines
        assert "class LoginViewModel : ViewStateViewModel<LoginViewModelState>(LoginViewModelState()) {" in lines

    def test_feature_viewmodel_empty_references(self, renderer: TemplateRenderer):
        text = renderer.render(
            templates.VIEWSTATE_VIEWMODEL,
            {
                "name": "A",
                "package": "p",
                "uistate_package": "",
                "atomicjob_package": "",
                "viewstate_viewmodel_package": "",
            },
        )
        assert "import" not in text

    def test_compose(self, renderer: TemplateRenderer):
        text = renderer.render(
            templates.COMPOSE,
            {
                "name": "LoginScreen",
                "package": "com.example.app.feature.login",
                "uistate_package": "com.example.app.UiState",
                "viewstate_viewmodel_package": "com.example.app.ViewStateViewModel",
            },
        )
        lines = text.splitlines()
        assert lines[0] == "package com.example.app.feature.login"
        assert "import com.example.app.UiState" in lines
        assert "import com.example.app.ViewStateViewModel" in lines
        assert "fun <S : UiState> LoginScreen(viewModel: ViewStateViewModel<S>) {" in lines

    def test_rendering_is_deterministic(self, renderer: TemplateRenderer):
        context = {"package": "com.example"}
        assert renderer.render(templates.UISTATE, context) == renderer.render(templates.UISTATE, context)


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


class TestRenderErrors:
    def test_missing_slot(self, renderer: TemplateRenderer):
        with pytest.raises(RenderError, match="package") as exc_info:
            renderer.render(templates.UISTATE, {})
        assert exc_info.value.template == templates.UISTATE

    def test_missing_template(self, renderer: TemplateRenderer):
        with pytest.raises(RenderError):
            renderer.render("Nope.kt.j2", {})

    def test_syntax_error_in_template(self, tmp_path: Path):
        (tmp_path / "Broken.kt.j2").write_text("{% if %}\n", encoding="utf-8")
        with pytest.raises(RenderError) as exc_info:
            TemplateRenderer(tmp_path).render("Broken.kt.j2", {})
        assert exc_info.value.template == "Broken.kt.j2"

    def test_render_to_file_writes_nothing_on_error(self, renderer: TemplateRenderer, tmp_path: Path):
        with pytest.raises(RenderError):
            renderer.render_to_file(templates.UISTATE, tmp_path / "out", "UiState", {})
        assert not (tmp_path / "out").exists()

    def test_render_to_file(self, renderer: TemplateRenderer, tmp_path: Path):
        path = renderer.render_to_file(
            templates.UISTATE, tmp_path / "out", "UiState", {"package": "a.b"}
        )
        assert path == tmp_path / "out" / "UiState.kt"
        assert path.read_text(encoding="utf-8").startswith("package a.b\n")

    def test_render_to_file_refuses_overwrite(self, renderer: TemplateRenderer, tmp_path: Path):
        existing = tmp_path / "UiState.kt"
        existing.write_text("keep", encoding="utf-8")
        with pytest.raises(FileExistsError):
            renderer.render_to_file(
                templates.UISTATE, tmp_path, "UiState", {"package": "a"}, overwrite=False
            )
        assert existing.read_text(encoding="utf-8") == "keep"

    def test_custom_template_dir(self, tmp_path: Path):
        (tmp_path / "Custom.kt.j2").write_text("class {{ name }}\n", encoding="utf-8")
        assert TemplateRenderer(tmp_path).render("Custom.kt.j2", {"name": "X"}) == "class X\n"
