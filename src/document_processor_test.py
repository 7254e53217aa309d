#!/usr/bin/env python3
"""Tests for document_processor module."""

import unittest

from bs4 import BeautifulSoup

from ansi_to_html import AnsiToHtml
from document_processor import DocumentProcessor


RED_SPAN = '<span style="display:contents;color:#cc0000;">'


class TestDocumentProcessor(unittest.TestCase):
    """Test cases for document_processor module."""

    def setUp(self):
        """Set up a fresh processor for each test"""
        self.processor = DocumentProcessor()

    def test_converts_pre_blocks(self):
        """Only <pre> blocks with codes are rewritten and marked"""
        document = (
            '<html><body>'
            '<pre>\x1b[31mred\x1b[0m ok</pre>'
            '<pre>plain</pre>'
            '<p>#x1B[31mnot a container</p>'
            '</body></html>'
        )
        result = self.processor.process_html(document)

        self.assertIn(f'<pre class="ansi-processed">{RED_SPAN}red</span> ok</pre>', result)
        self.assertIn('<pre>plain</pre>', result)
        self.assertIn('<p>#x1B[31mnot a container</p>', result)

    def test_literal_escapes_and_entities(self):
        """Container text is taken unescaped and re-escaped on output"""
        result = self.processor.process_html('<pre>#x1B[1m&lt;b&gt; &amp;#x1B[0m</pre>')
        self.assertEqual(
            result,
            '<pre class="ansi-processed"><span style="display:contents;font-weight:bold;">'
            '&lt;b&gt; &amp;</span></pre>'
        )

    def test_nested_markup_flattened_to_text(self):
        """The container's whole text content is converted"""
        result = self.processor.process_html('<pre><code>#x1B[31mred</code> tail</pre>')
        self.assertEqual(result, f'<pre class="ansi-processed">{RED_SPAN}red tail</span></pre>')

    def test_nested_containers_counted_once(self):
        """A container inside a rewritten one is not converted separately"""
        soup = BeautifulSoup('<pre>#x1B[31ma<pre>#x1B[32mb</pre></pre>', 'html.parser')

        self.assertEqual(self.processor.process_soup(soup), 1)
        self.assertEqual(len(soup.find_all('pre')), 1)
        self.assertEqual(
            str(soup),
            f'<pre class="ansi-processed">{RED_SPAN}a</span>'
            '<span style="display:contents;color:#4e9a06;">b</span></pre>'
        )

    def test_rescan_only_processes_new_containers(self):
        """Calling again after the document changes handles only new blocks"""
        soup = BeautifulSoup('<div><pre>#x1B[31mfirst</pre><pre>no codes</pre></div>', 'html.parser')
        self.assertEqual(self.processor.process_soup(soup), 1)

        new_pre = soup.new_tag('pre')
        new_pre.string = '#x1b[32msecond'
        soup.div.append(new_pre)

        self.assertEqual(self.processor.process_soup(soup), 1)
        self.assertEqual(self.processor.process_soup(soup), 0)
        self.assertEqual(len(soup.find_all(class_='ansi-processed')), 2)

    def test_container_without_codes_not_reprocessed(self):
        """A container seen without codes is not looked at again"""
        soup = BeautifulSoup('<pre>plain</pre>', 'html.parser')
        self.processor.process_soup(soup)

        soup.pre.string = '#x1B[31mlate color'
        self.assertEqual(self.processor.process_soup(soup), 0)
        self.assertEqual(soup.pre.get_text(), '#x1B[31mlate color')

    def test_marked_containers_skipped(self):
        """Containers already carrying the marker class are left alone"""
        document = '<pre class="log ansi-processed">\x1b[31mx</pre>'
        soup = BeautifulSoup(document, 'html.parser')
        self.assertEqual(self.processor.process_soup(soup), 0)
        self.assertIn('\x1b[31mx', soup.pre.get_text())

    def test_existing_classes_kept(self):
        """The marker class is appended to existing classes"""
        result = self.processor.process_html('<pre class="log">#x1B[31mx</pre>')
        self.assertIn('<pre class="log ansi-processed">', result)

    def test_custom_container_and_converter(self):
        """Container tag, marker class and converter are configurable"""
        processor = DocumentProcessor(
            converter=AnsiToHtml(aggressive=True),
            container_tag='code',
            processed_class='colored',
        )
        result = processor.process_html('<pre>#x1B[31ma</pre><code>#x1B[31mb</code>')

        self.assertIn('<pre>#x1B[31ma</pre>', result)
        self.assertIn('<code class="colored"><span style="display:inline !important;', result)

    def test_logs_processed_containers(self):
        """Each converted container is logged"""
        with self.assertLogs('document_processor', level='INFO') as logs:
            self.processor.process_html('<pre>#x1B[31ma</pre>')
        self.assertEqual(len(logs.output), 1)
        self.assertIn('Processed terminal output', logs.output[0])


if __name__ == '__main__':
    unittest.main()
