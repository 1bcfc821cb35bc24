import unittest
import sys
import dataclasses
import json
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from GPT3 import Model, BuilderError, DecodeError
from GPT3.api import RequestBuilder
from GPT3.api import completions, edits, answers, classifications, searches
from GPT3.api.files import metadata, content, delete, list as file_list
from GPT3.helpers import OPENAI_URL


class TestBuilders(unittest.TestCase):
	def test_chained_setters_build_the_request(self):
		request = completions.Builder() \
			.model(Model.CURIE) \
			.prompt("Say this is a test") \
			.max_tokens(5) \
			.temperature(1.0) \
			.n(1) \
			.stop("\n") \
			.build()

		self.assertEqual(request, completions.Request(
			model=Model.CURIE, prompt="Say this is a test", max_tokens=5, temperature=1.0, n=1, stop="\n"
		))

	def test_unset_optional_fields_are_not_in_the_payload(self):
		request = completions.Builder().model(Model.BABBAGE).prompt("what is 1 + 2?").build()
		payload = request.payload()

		self.assertEqual(payload, {"prompt": "what is 1 + 2?"})
		self.assertNotIn("max_tokens", payload)
		self.assertNotIn("max_tokens", json.dumps(payload))

	def test_missing_required_field_names_it(self):
		with self.assertRaises(BuilderError) as context:
			edits.Builder().model(Model.DAVINCI).input("What day of the wek is it?").build()
		self.assertEqual(context.exception.field_name, "instruction")
		self.assertEqual(context.exception.request_type, "edits.Request")
		self.assertIn("instruction", str(context.exception))

	def test_first_missing_field_in_declaration_order(self):
		with self.assertRaises(BuilderError) as context:
			answers.Builder().question("which puppy is happy?").build()
		self.assertEqual(context.exception.field_name, "model")

	def test_required_field_set_to_none_is_missing(self):
		with self.assertRaises(BuilderError) as context:
			searches.Builder().model(Model.ADA).query(None).build()
		self.assertEqual(context.exception.field_name, "query")

	def test_unknown_field_fails_immediately(self):
		with self.assertRaises(AttributeError):
			completions.Builder().not_a_field("x")

	def test_builder_from_request_type(self):
		builder = searches.Request.builder()
		self.assertIsInstance(builder, RequestBuilder)
		request = builder.model(Model.ADA).query("the president").documents(["White house", "hospital"]).build()
		self.assertEqual(request.documents, ["White house", "hospital"])

	def test_built_requests_are_immutable(self):
		request = edits.Request.build(model=Model.DAVINCI, instruction="Fix the spelling mistakes")
		with self.assertRaises(dataclasses.FrozenInstanceError):
			request.instruction = "Something else"


class TestPayloads(unittest.TestCase):
	def test_completion(self):
		request = completions.Request.build(model=Model.ADA, prompt=["a", "b"], logit_bias={"50256": -100}, echo=False)
		self.assertEqual(request.url(OPENAI_URL), f"{OPENAI_URL}/engines/text-ada-001/completions")
		self.assertEqual(request.method, "POST")
		self.assertEqual(request.payload(), {"prompt": ["a", "b"], "echo": False, "logit_bias": {"50256": -100}})

	def test_edit(self):
		request = edits.Request.build(model=Model.CURIE, input="What day of the wek is it?", instruction="Fix the spelling mistakes")
		self.assertEqual(request.url(OPENAI_URL), f"{OPENAI_URL}/engines/text-davinci-edit-001/edits")
		self.assertEqual(request.payload(), {"instruction": "Fix the spelling mistakes", "input": "What day of the wek is it?"})

	def test_answer_sends_models_by_name(self):
		request = answers.Builder() \
			.model(Model.CURIE) \
			.search_model(Model.ADA) \
			.question("which puppy is happy?") \
			.documents(["Puppy A is happy.", "Puppy B is sad."]) \
			.examples_context("In 2017, U.S. life expectancy was 78.6 years.") \
			.examples([["What is human life expectancy in the United States?", "78 years."]]) \
			.max_tokens(5) \
			.stop(["\n", "<|endoftext|>"]) \
			.build()

		self.assertEqual(request.url(OPENAI_URL), f"{OPENAI_URL}/answers")
		self.assertEqual(request.payload(), {
			"model": "curie",
			"question": "which puppy is happy?",
			"examples": [["What is human life expectancy in the United States?", "78 years."]],
			"examples_context": "In 2017, U.S. life expectancy was 78.6 years.",
			"documents": ["Puppy A is happy.", "Puppy B is sad."],
			"search_model": "ada",
			"max_tokens": 5,
			"stop": ["\n", "<|endoftext|>"],
		})

	def test_classification(self):
		request = classifications.Request.build(
			model=Model.CURIE,
			query="It is a raining day :(",
			examples=[["A happy moment", "Positive"], ["I am sad.", "Negative"]],
			labels=["Positive", "Negative", "Neutral"],
		)
		self.assertEqual(request.url(OPENAI_URL), f"{OPENAI_URL}/classifications")
		self.assertEqual(set(request.payload()), {"model", "query", "examples", "labels"})

	def test_search(self):
		request = searches.Request.build(model=Model.DAVINCI, query="the president", file="file-abc", max_rerank=10)
		self.assertEqual(request.url(OPENAI_URL), f"{OPENAI_URL}/engines/text-davinci-002/search")
		self.assertEqual(request.payload(), {"query": "the president", "file": "file-abc", "max_rerank": 10})

	def test_file_requests_have_no_body(self):
		self.assertEqual(metadata.Request("file-abc").url(OPENAI_URL), f"{OPENAI_URL}/files/file-abc")
		self.assertEqual(content.Request("file-abc").url(OPENAI_URL), f"{OPENAI_URL}/files/file-abc/content")
		self.assertEqual(file_list.Request().url(OPENAI_URL), f"{OPENAI_URL}/files")

		delete_request = delete.Request("file-abc")
		self.assertEqual(delete_request.method, "DELETE")
		self.assertEqual(delete_request.url(OPENAI_URL), f"{OPENAI_URL}/files/file-abc")

		for request in (metadata.Request("file-abc"), content.Request("file-abc"), file_list.Request(), delete_request):
			self.assertIsNone(request.payload())
			self.assertIsNone(request.multipart())

	def test_file_id_is_escaped_in_the_path(self):
		self.assertEqual(metadata.Request("a/b").url(OPENAI_URL), f"{OPENAI_URL}/files/a%2Fb")
		self.assertEqual(content.Request("a b?c").url(OPENAI_URL), f"{OPENAI_URL}/files/a%20b%3Fc/content")
		self.assertEqual(delete.Request("../x").url(OPENAI_URL), f"{OPENAI_URL}/files/..%2Fx")

	def test_file_id_is_required(self):
		with self.assertRaises(BuilderError) as context:
			metadata.Builder().build()
		self.assertEqual(context.exception.field_name, "file_id")


class TestResponses(unittest.TestCase):
	def test_completion_response(self):
		body = json.dumps({
			"id": "cmpl-uqkvlQyYK7bGYrRHQ0eXlWi7",
			"object": "text_completion",
			"created": 1589478378,
			"model": "text-curie-001",
			"choices": [{"text": "\n\nThis is a test", "index": 0, "logprobs": None, "finish_reason": "length"}],
		})
		response = completions.Request.build(model=Model.CURIE).decode(body)

		self.assertEqual(response.model, "text-curie-001")
		self.assertEqual(response.choices[0].text, "\n\nThis is a test")
		self.assertEqual(response.choices[0].finish_reason, "length")
		self.assertIsNone(response.choices[0].logprobs)
		self.assertIsNone(response.usage)

	def test_partial_search_response(self):
		body = json.dumps({"data": [{"document": 0, "object": "search_result", "score": 215.412}]})
		response = searches.Request.build(model=Model.ADA, query="q").decode(body)

		self.assertIsNone(response.object)
		self.assertIsNone(response.model)
		self.assertEqual(response.data[0].score, 215.412)

	def test_classification_response(self):
		body = json.dumps({
			"completion": "cmpl-2euN7lUVZ0d4RKbQqRV79IiiE6M1f",
			"label": "Negative",
			"model": "curie:2020-05-03",
			"object": "classification",
			"search_model": "ada",
			"selected_examples": [{"document": 1, "label": "Negative", "text": "I am sad."}],
		})
		response = classifications.Request.build(model=Model.CURIE, query="q").decode(body)

		self.assertEqual(response.label, "Negative")
		self.assertEqual(response.selected_examples[0].document, 1)

	def test_missing_required_key_is_a_decode_error(self):
		body = json.dumps({"object": "edit", "created": 1589478378})
		with self.assertRaises(DecodeError) as context:
			edits.Request.build(model=Model.DAVINCI, instruction="x").decode(body)
		self.assertEqual(context.exception.response_type, "Response")
		self.assertEqual(context.exception.body, body)

	def test_non_json_is_a_decode_error(self):
		with self.assertRaises(DecodeError):
			delete.Request("file-abc").decode("<html>Bad Gateway</html>")

	def test_responses_are_immutable(self):
		body = json.dumps({"object": "edit", "created": 1589478378, "choices": [{"text": "What day of the week is it?", "index": 0}]})
		response = edits.Request.build(model=Model.DAVINCI, instruction="x").decode(body)
		with self.assertRaises(dataclasses.FrozenInstanceError):
			response.created = 0
		with self.assertRaises(dataclasses.FrozenInstanceError):
			response.choices[0].text = "changed"

		deleted = delete.Request("file-abc").decode(json.dumps({"id": "file-abc", "object": "file", "deleted": True}))
		with self.assertRaises(dataclasses.FrozenInstanceError):
			deleted.deleted = False

	def test_content_is_not_parsed(self):
		response = content.Request("file-abc").decode('{"text": "a"}\n{"text": "b"}\n')
		self.assertEqual(response.content, '{"text": "a"}\n{"text": "b"}\n')

if __name__ == '__main__':
	unittest.main()
