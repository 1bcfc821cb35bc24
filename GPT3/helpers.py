from typing import Any, Dict, Iterable, Iterator, Tuple
import json

OPENAI_URL = "https://api.openai.com/v1"

def join_url(base_url:str, *parts:str) -> str:
	'''
	Join url segments with exactly one slash between each.
	'''
	url = base_url.rstrip('/')
	for part in parts:
		part = part.strip('/')
		if part:
			url += '/' + part
	return url

def to_json_line(record:Dict[str, Any]) -> str:
	'''Compact single line json for a record dict.'''
	return json.dumps(record, separators=(',', ':'), ensure_ascii=False)

def to_json_lines(records:Iterable[Dict[str, Any]]) -> str:
	'''
	Newline delimited json, one record per line, each line newline terminated.
	'''
	return ''.join(to_json_line(record) + '\n' for record in records)

def split_json_lines(text:str) -> Iterator[Tuple[int, str]]:
	'''
	Yields (line index, line) for every non blank line in text.

	Lines end at '\\n' only (a trailing '\\r' is dropped), other unicode
	line breaks can appear unescaped inside a json string.
	The index is the 0 based physical line number, so blank lines
	still count toward it.
	'''
	for index, line in enumerate(text.split('\n')):
		if line.endswith('\r'):
			line = line[:-1]
		if line.strip():
			yield index, line

def error_message(body:str) -> str:
	'''
	Safely get the service's error message from body['error']['message'],
	falling back to the (truncated) body itself.
	'''
	try:
		data = json.loads(body)
	except ValueError:
		return body[:800]
	if isinstance(data, dict):
		error = data.get('error')
		if isinstance(error, dict) and error.get('message'):
			return str(error['message'])
	return body[:800]

def code_block_text(text:str, language:str='txt'):
	'''Wraps text in a markdown code block of the specified language.'''
	return f"```{language}\n{text}\n```"
