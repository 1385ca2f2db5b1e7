"""Tests for flow and standalone page presenters."""

from content_publisher.config import PublishingApiConfig
from content_publisher.presenters import (
    Flow,
    FlowNode,
    FlowRegistrationPresenter,
    RelatedLink,
    answer_payload,
    transaction_payload,
)


def _make_flow(**kwargs) -> Flow:
    defaults = {
        "name": "bridge-of-death",
        "title": "The Bridge of Death",
        "start_page_content_id": "start-id",
        "flow_content_id": "flow-id",
        "body": "Answer me these questions three.",
        "nodes": [
            FlowNode(content_id="node-1", name="what-is-your-name", title="What is your name?"),
            FlowNode(
                content_id="node-2",
                name="what-is-your-quest",
                title="What is your quest?",
                body="Choose wisely.",
            ),
        ],
    }
    defaults.update(kwargs)
    return Flow(**defaults)


class TestFlowRegistrationPresenter:
    def test_exposes_flow_identifiers(self):
        presenter = FlowRegistrationPresenter(_make_flow())
        assert presenter.name == "bridge-of-death"
        assert presenter.start_page_content_id == "start-id"
        assert presenter.flow_content_id == "flow-id"
        assert presenter.external_related_links is None

    def test_nodes_keep_declaration_order(self):
        presenter = FlowRegistrationPresenter(_make_flow())
        assert [n.content_id for n in presenter.nodes] == ["node-1", "node-2"]

    def test_start_page_id(self):
        presenter = FlowRegistrationPresenter(_make_flow())
        assert presenter.start_page.content_id == "start-id"

    def test_config_read_from_env_when_omitted(self, monkeypatch):
        monkeypatch.setenv("PUBLISHING_APP", "publisher")
        presenter = FlowRegistrationPresenter(_make_flow())

        assert presenter.start_page.to_payload().publishing_app == "publisher"
        assert all(n.to_payload().publishing_app == "publisher" for n in presenter.nodes)

    def test_explicit_config_wins_over_env(self, monkeypatch):
        monkeypatch.setenv("PUBLISHING_APP", "publisher")
        presenter = FlowRegistrationPresenter(
            _make_flow(), PublishingApiConfig(publishing_app="smartanswers")
        )
        assert presenter.start_page.to_payload().publishing_app == "smartanswers"


class TestStartPagePayload:
    def test_payload_shape(self):
        config = PublishingApiConfig(publishing_app="smartanswers", rendering_app="frontend")
        payload = FlowRegistrationPresenter(_make_flow(), config).start_page.to_payload()

        assert payload.base_path == "/bridge-of-death"
        assert payload.title == "The Bridge of Death"
        assert payload.schema_name == "transaction"
        assert payload.publishing_app == "smartanswers"
        assert payload.details["transaction_start_link"] == "/bridge-of-death/y"
        assert payload.details["start_button_text"] == "Start now"
        assert payload.details["introductory_paragraph"] == [
            {"content_type": "text/govspeak", "content": "Answer me these questions three."}
        ]
        assert "external_related_links" not in payload.details
        assert payload.links == {"flow": ["flow-id"]}
        assert [r.path for r in payload.routes] == ["/bridge-of-death"]

    def test_related_links_included(self):
        flow = _make_flow(
            external_related_links=[RelatedLink(title="Swallows", url="https://example.com")]
        )
        payload = FlowRegistrationPresenter(flow).start_page.to_payload()
        assert payload.details["external_related_links"] == [
            {"title": "Swallows", "url": "https://example.com"}
        ]

    def test_title_falls_back_to_name(self):
        payload = FlowRegistrationPresenter(_make_flow(title="")).start_page.to_payload()
        assert payload.title == "Bridge of death"

    def test_description_omitted_when_empty(self):
        payload = FlowRegistrationPresenter(_make_flow()).start_page.to_payload()
        assert "description" not in payload.to_request_body()


class TestNodePayload:
    def test_payload_shape(self):
        node = FlowRegistrationPresenter(_make_flow()).nodes[1]
        payload = node.to_payload()

        assert payload.base_path == "/bridge-of-death/what-is-your-quest"
        assert payload.title == "What is your quest?"
        assert payload.schema_name == "smart_answer"
        assert payload.details["body"][0]["content"] == "Choose wisely."
        assert payload.links == {"parent": ["start-id"]}


class TestStandalonePayloads:
    def test_transaction_payload(self):
        payload = transaction_payload(
            "/base-path",
            publishing_app="publisher",
            title="T",
            content="C",
            link="https://example.com/start",
            config=PublishingApiConfig(),
        )
        body = payload.to_request_body()
        assert body["document_type"] == "transaction"
        assert body["update_type"] == "major"
        assert body["details"] == {
            "introductory_paragraph": [{"content_type": "text/govspeak", "content": "C"}],
            "transaction_start_link": "https://example.com/start",
        }

    def test_answer_payload(self):
        payload = answer_payload(
            "/base-path",
            publishing_app="publisher",
            title="T",
            content="C",
            config=PublishingApiConfig(locale="cy"),
        )
        body = payload.to_request_body()
        assert body["schema_name"] == "answer"
        assert body["locale"] == "cy"
        assert body["details"] == {"body": [{"content_type": "text/govspeak", "content": "C"}]}
