"""
Tests for the AI backend adapter.

The provider SDKs are always mocked; these tests cover the uniform
"text or None" contract and backend selection from the app config.
"""

import pytest
from unittest.mock import Mock, patch
from helpers.ai_models import (
    AIModel,
    DEFAULT_MODEL,
    BaseTextModel,
    DeepSeekTextModel,
    GeminiTextModel,
    generate_text,
    get_text_model,
)


class TestConstants:
    """Test constants and expected values."""

    API_KEY = "test-api-key"
    PROMPT = "Rewrite this post"
    GENERATED_CONTENT = "  Rewritten post #tech  "


class AIModelTestHelpers:
    """Helper methods for backend testing."""

    @staticmethod
    def create_mock_gemini_response(text=TestConstants.GENERATED_CONTENT):
        mock_response = Mock()
        mock_response.text = text
        return mock_response

    @staticmethod
    def create_mock_chat_completion(text=TestConstants.GENERATED_CONTENT):
        mock_message = Mock()
        mock_message.content = text
        mock_choice = Mock()
        mock_choice.message = mock_message
        mock_completion = Mock()
        mock_completion.choices = [mock_choice]
        return mock_completion


@pytest.mark.unit
class TestAIModel:
    """Test AIModel enum."""

    def test_model_values(self):
        assert AIModel.GEMINI.value == "gemini"
        assert AIModel.DEEPSEEK.value == "deepseek"
        assert len(AIModel) == 2

    def test_default_model_is_gemini(self):
        assert DEFAULT_MODEL is AIModel.GEMINI

    def test_unknown_model_rejected(self):
        with pytest.raises(ValueError):
            AIModel("gpt-4")


@pytest.mark.unit
class TestGeminiTextModel(AIModelTestHelpers):
    """Test the Gemini backend."""

    @patch("helpers.ai_models.genai")
    def test_generate_text_returns_raw_text(self, mock_genai):
        mock_model = Mock()
        mock_model.generate_content.return_value = self.create_mock_gemini_response()
        mock_genai.GenerativeModel.return_value = mock_model

        backend = GeminiTextModel(TestConstants.API_KEY, "gemini-1.5-pro", 0.5)
        result = backend.generate_text(TestConstants.PROMPT)

        assert result == TestConstants.GENERATED_CONTENT
        mock_genai.configure.assert_called_once_with(api_key=TestConstants.API_KEY)
        mock_genai.GenerativeModel.assert_called_once_with("gemini-1.5-pro")
        args, kwargs = mock_model.generate_content.call_args
        assert args[0] == TestConstants.PROMPT
        mock_genai.types.GenerationConfig.assert_called_once_with(temperature=0.5)

    @patch("helpers.ai_models.genai")
    def test_generate_text_api_failure_returns_none(self, mock_genai):
        mock_model = Mock()
        mock_model.generate_content.side_effect = Exception("quota exceeded")
        mock_genai.GenerativeModel.return_value = mock_model

        backend = GeminiTextModel(TestConstants.API_KEY, "gemini-1.5-pro")

        assert backend.generate_text(TestConstants.PROMPT) is None

    @patch("helpers.ai_models.genai")
    def test_generate_text_without_api_key_returns_none(self, mock_genai):
        backend = GeminiTextModel(None, "gemini-1.5-pro")

        assert backend.generate_text(TestConstants.PROMPT) is None
        mock_genai.GenerativeModel.assert_not_called()

    def test_backend_name(self):
        assert GeminiTextModel("k", "m").get_backend_name() == "Gemini"


@pytest.mark.unit
class TestDeepSeekTextModel(AIModelTestHelpers):
    """Test the DeepSeek backend."""

    @patch("helpers.ai_models.OpenAI")
    def test_generate_text_uses_chat_completion(self, mock_openai_class):
        mock_client = Mock()
        mock_client.chat.completions.create.return_value = (
            self.create_mock_chat_completion()
        )
        mock_openai_class.return_value = mock_client

        backend = DeepSeekTextModel(
            TestConstants.API_KEY,
            "deepseek-chat",
            temperature=0.7,
            base_url="https://api.deepseek.com",
        )
        result = backend.generate_text(TestConstants.PROMPT)

        assert result == TestConstants.GENERATED_CONTENT
        mock_openai_class.assert_called_once_with(
            api_key=TestConstants.API_KEY, base_url="https://api.deepseek.com"
        )
        mock_client.chat.completions.create.assert_called_once_with(
            model="deepseek-chat",
            messages=[{"role": "user", "content": TestConstants.PROMPT}],
            temperature=0.7,
        )

    @patch("helpers.ai_models.OpenAI")
    def test_generate_text_no_choices_returns_none(self, mock_openai_class):
        mock_client = Mock()
        mock_completion = Mock()
        mock_completion.choices = []
        mock_client.chat.completions.create.return_value = mock_completion
        mock_openai_class.return_value = mock_client

        backend = DeepSeekTextModel(TestConstants.API_KEY, "deepseek-chat")

        assert backend.generate_text(TestConstants.PROMPT) is None

    @patch("helpers.ai_models.OpenAI")
    def test_generate_text_api_failure_returns_none(self, mock_openai_class):
        mock_openai_class.return_value.chat.completions.create.side_effect = (
            ConnectionError("unreachable")
        )

        backend = DeepSeekTextModel(TestConstants.API_KEY, "deepseek-chat")

        assert backend.generate_text(TestConstants.PROMPT) is None

    def test_backend_name(self):
        assert DeepSeekTextModel("k", "m").get_backend_name() == "DeepSeek"


@pytest.mark.integration
class TestBackendSelection:
    """Test backend construction from the application config."""

    def test_get_text_model_gemini(self, app):
        with app.app_context():
            backend = get_text_model(AIModel.GEMINI)

        assert isinstance(backend, GeminiTextModel)
        assert backend.api_key == app.config["GEMINI_API_KEY"]
        assert backend.model_name == app.config["GEMINI_MODEL_NAME"]

    def test_get_text_model_deepseek(self, app):
        with app.app_context():
            backend = get_text_model(AIModel.DEEPSEEK)

        assert isinstance(backend, DeepSeekTextModel)
        assert backend.api_key == app.config["DEEPSEEK_API_KEY"]
        assert backend.base_url == app.config["DEEPSEEK_BASE_URL"]
        assert backend.model_name == app.config["DEEPSEEK_MODEL_NAME"]

    def test_backends_share_the_interface(self, app):
        with app.app_context():
            backends = [get_text_model(model) for model in AIModel]

        assert all(isinstance(backend, BaseTextModel) for backend in backends)

    @pytest.mark.parametrize(
        "model, backend_class",
        [(AIModel.GEMINI, GeminiTextModel), (AIModel.DEEPSEEK, DeepSeekTextModel)],
    )
    def test_generate_text_dispatches_to_selected_backend(
        self, app, model, backend_class
    ):
        with app.app_context():
            with patch.object(
                backend_class, "_call_api", return_value="generated"
            ) as mock_call:
                result = generate_text(TestConstants.PROMPT, model)

        assert result == "generated"
        mock_call.assert_called_once_with(TestConstants.PROMPT)

    def test_generate_text_defaults_to_gemini(self, app):
        with app.app_context():
            with patch.object(
                GeminiTextModel, "_call_api", return_value="from gemini"
            ) as mock_gemini, patch.object(
                DeepSeekTextModel, "_call_api"
            ) as mock_deepseek:
                result = generate_text(TestConstants.PROMPT)

        assert result == "from gemini"
        mock_gemini.assert_called_once()
        mock_deepseek.assert_not_called()
