import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from GPT3.Model import Model
from GPT3.helpers import OPENAI_URL


class TestModelUrl(unittest.TestCase):
	def test_every_model_has_an_engine_url(self):
		expected = {
			Model.ADA: "https://api.openai.com/v1/engines/text-ada-001/completions",
			Model.BABBAGE: "https://api.openai.com/v1/engines/text-babbage-001/completions",
			Model.CURIE: "https://api.openai.com/v1/engines/text-curie-001/completions",
			Model.DAVINCI: "https://api.openai.com/v1/engines/text-davinci-002/completions",
		}
		for model in Model:
			self.assertEqual(model.url("/completions"), expected[model])

	def test_url_is_idempotent(self):
		for model in Model:
			self.assertEqual(model.url("/search"), model.url("/search"))

	def test_slashes_are_normalized(self):
		self.assertEqual(Model.ADA.url("search"), f"{OPENAI_URL}/engines/text-ada-001/search")
		self.assertEqual(Model.ADA.url("/search", "http://localhost:8080/v1/"), "http://localhost:8080/v1/engines/text-ada-001/search")

	def test_edit_url(self):
		for model in Model:
			self.assertEqual(model.edit_url("/edits"), f"{OPENAI_URL}/engines/text-davinci-edit-001/edits")

	def test_wire_names(self):
		self.assertEqual([model.value for model in Model], ["ada", "babbage", "curie", "davinci"])
		self.assertIs(Model("curie"), Model.CURIE)

if __name__ == '__main__':
	unittest.main()
