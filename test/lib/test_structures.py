import io

from utf16io.lib.exceptions import WriteZero
from utf16io.lib.structures import BE, EOF, LE, WordStream, order

from .. import TestBase, ScriptedStream


class TestWordStream(TestBase):

    def test_byte_order_names(self):
        self.assertIs(order('little'), LE)
        self.assertIs(order('big'), BE)
        self.assertEqual(LE, 'little')

    def test_read_u16_little_and_big(self):
        ws = WordStream(io.BytesIO(B'\x34\x12\x12\x34'))
        self.assertEqual(ws.read_u16(LE), 0x1234)
        self.assertEqual(ws.read_u16(BE), 0x1234)

    def test_read_u16_eof(self):
        ws = WordStream(io.BytesIO(B'\x41\x00\x42'))
        self.assertEqual(ws.read_u16(LE), 0x41)
        with self.assertRaises(EOF) as context:
            ws.read_u16(LE)
        self.assertEqual(bytes(context.exception), B'\x42')
        self.assertEqual(context.exception.size, 2)
        with self.assertRaises(EOFError):
            ws.read_u16(LE)

    def test_read_exactly_continues_short_reads(self):
        class Trickle(ScriptedStream):
            def read(self, size=-1):
                return super().read(1)
        ws = WordStream(Trickle(B'\xFF\xFE\x00'))
        self.assertEqual(ws.read_exactly(2), B'\xFF\xFE')
        self.assertRaises(EOF, ws.read_exactly, 2)

    def test_read_exactly_retries_interruption(self):
        stream = ScriptedStream(B'\x41\x00', failures={0: InterruptedError()})
        ws = WordStream(stream)
        self.assertEqual(ws.read_u16(LE), 0x41)
        self.assertEqual(stream.calls, 2)

    def test_read_error_propagates(self):
        ws = WordStream(ScriptedStream(B'\x41\x00', failures={0: PermissionError()}))
        self.assertRaises(PermissionError, ws.read_u16, LE)

    def test_write_u16_little_and_big(self):
        buffer = io.BytesIO()
        ws = WordStream(buffer)
        ws.write_u16(LE, 0xFEFF)
        ws.write_u16(BE, 0xFEFF)
        self.assertEqual(buffer.getvalue(), B'\xFF\xFE\xFE\xFF')

    def test_write_u16_range(self):
        ws = WordStream(io.BytesIO())
        self.assertRaises(ValueError, ws.write_u16, LE, 0x10000)
        self.assertRaises(ValueError, ws.write_u16, LE, -1)

    def test_write_continues_short_writes(self):
        stream = ScriptedStream(accept=1)
        WordStream(stream).write_u16(BE, 0x1234)
        self.assertEqual(stream.written, B'\x12\x34')
        self.assertEqual(stream.calls, 2)

    def test_write_zero(self):
        ws = WordStream(ScriptedStream(accept=0))
        self.assertRaises(WriteZero, ws.write_u16, LE, 0x41)

    def test_closing_releases_stream(self):
        buffer = io.BytesIO(B'\x00\x00')
        with WordStream(buffer) as ws:
            self.assertFalse(ws.closed)
        self.assertTrue(buffer.closed)
        self.assertTrue(ws.closed)

    def test_wrapping_a_word_stream(self):
        buffer = io.BytesIO()
        self.assertIs(WordStream(WordStream(buffer)).stream, buffer)
