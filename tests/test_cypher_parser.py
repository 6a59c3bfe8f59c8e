"""
Test suite for the Cypher pattern parser
"""

import unittest

from cypher2sql.cypher import CypherParser, parse_node_pattern, parse_pattern
from cypher2sql.cypher.ast_nodes import *
from cypher2sql.errors import LexError, ParseError, UnsupportedConstruct


class TestNodePatterns(unittest.TestCase):
    """Test node pattern parsing"""

    def setUp(self):
        self.parser = CypherParser()

    def test_simple_node(self):
        """Test variable and label"""
        node = self.parser.parse_node_pattern("(n:Person)")

        self.assertIsInstance(node, NodePattern)
        self.assertEqual(node.variable, 'n')
        self.assertEqual(node.labels, ('Person',))
        self.assertIsNone(node.properties)

    def test_whitespace_is_insignificant(self):
        """Test whitespace around every token"""
        node = self.parser.parse_node_pattern("(  n  :  Person  )")

        self.assertEqual(node.variable, 'n')
        self.assertEqual(node.labels, ('Person',))

    def test_no_variable(self):
        """Test anonymous node"""
        node = self.parser.parse_node_pattern("(:Person)")

        self.assertIsNone(node.variable)
        self.assertEqual(node.label, 'Person')

    def test_no_label(self):
        """Test node without label still parses"""
        node = self.parser.parse_node_pattern("(n)")

        self.assertEqual(node.variable, 'n')
        self.assertEqual(node.labels, ())
        self.assertIsNone(node.label)

    def test_empty_node(self):
        """Test ()"""
        node = self.parser.parse_node_pattern("()")

        self.assertIsNone(node.variable)
        self.assertEqual(node.labels, ())

    def test_multiple_labels_are_ordered_set(self):
        """Test labels keep first-seen order without duplicates"""
        node = self.parser.parse_node_pattern("(n:Person:Employee:Person)")

        self.assertEqual(node.labels, ('Person', 'Employee'))

    def test_keyword_as_variable(self):
        """Test keywords are plain identifiers inside a pattern"""
        node = self.parser.parse_node_pattern("(match:Return)")

        self.assertEqual(node.variable, 'match')
        self.assertEqual(node.labels, ('Return',))

    def test_unicode_names(self):
        """Test non-ASCII letters in variable, label and key"""
        node = self.parser.parse_node_pattern("(größe:Persön {straße: 'Hauptstraße'})")

        self.assertEqual(node.variable, 'größe')
        self.assertEqual(node.labels, ('Persön',))
        self.assertEqual(node.properties.items['straße'], StringLiteral('Hauptstraße'))

    def test_keywords_as_names(self):
        """Test statement keywords as variable, label, key and value"""
        node = self.parser.parse_node_pattern("(create:Where {return: match})")

        self.assertEqual(node.variable, 'create')
        self.assertEqual(node.labels, ('Where',))
        self.assertEqual(node.properties.items['return'], IdentifierReference('match'))

    def test_literal_words_are_not_names(self):
        """Test true/false/null cannot name a variable or key"""
        for text in ("(true:Person)", "(n:Person {null: 1})"):
            with self.subTest(text=text):
                with self.assertRaises(ParseError):
                    self.parser.parse_node_pattern(text)

    def test_position_recorded(self):
        """Test node start offset"""
        node = self.parser.parse_node_pattern("   (n:Person)")

        self.assertEqual(node.position, 3)


class TestPropertyMaps(unittest.TestCase):
    """Test property map parsing"""

    def setUp(self):
        self.parser = CypherParser()

    def test_match_with_properties(self):
        """Test property map with typed values"""
        node = self.parser.parse_node_pattern("(n:Person {name: 'Alice', age: 30})")

        self.assertEqual(node.properties.keys(), ['name', 'age'])
        self.assertEqual(node.properties.items['name'], StringLiteral('Alice'))
        self.assertEqual(node.properties.items['age'], IntegerLiteral(30))

    def test_declaration_order_kept(self):
        """Test keys stay in source order"""
        node = self.parser.parse_node_pattern("(n:T {z: 1, a: 2, m: 3})")

        self.assertEqual(node.properties.keys(), ['z', 'a', 'm'])

    def test_all_value_types(self):
        """Test every literal kind in one map"""
        node = self.parser.parse_node_pattern(
            "(p:Product {name: \"Widget\", price: 9.99, stock: -3, active: TRUE, "
            "note: null, owner: n})"
        )

        self.assertEqual(node.properties.values(), [
            StringLiteral('Widget'),
            FloatLiteral(9.99),
            IntegerLiteral(-3),
            BooleanLiteral(True),
            NullLiteral(),
            IdentifierReference('n'),
        ])

    def test_empty_map(self):
        """Test {} yields zero properties, not an error"""
        node = self.parser.parse_node_pattern("(n:Person {})")

        self.assertIsNotNone(node.properties)
        self.assertEqual(len(node.properties), 0)
        self.assertFalse(node.has_properties)

    def test_absent_map(self):
        """Test absent map is distinguished from empty map"""
        node = self.parser.parse_node_pattern("(n:Person)")

        self.assertIsNone(node.properties)
        self.assertFalse(node.has_properties)

    def test_string_without_escape_processing(self):
        """Test backslashes are kept verbatim"""
        node = self.parser.parse_node_pattern(r"(n:Path {dir: 'C:\temp'})")

        self.assertEqual(node.properties.items['dir'], StringLiteral(r'C:\temp'))

    def test_quote_of_other_kind_inside_string(self):
        """Test a double quote inside a single-quoted literal"""
        node = self.parser.parse_node_pattern("(n:Quote {text: 'say \"hi\"'})")

        self.assertEqual(node.properties.items['text'], StringLiteral('say "hi"'))


class TestPatternErrors(unittest.TestCase):
    """Test malformed patterns are rejected"""

    def setUp(self):
        self.parser = CypherParser()

    def test_missing_value(self):
        """Test {name} is a parse error, not silently dropped"""
        with self.assertRaises(ParseError) as ctx:
            self.parser.parse_node_pattern("(n:Person {name})")

        self.assertEqual(ctx.exception.position, 15)
        self.assertIn("':'", ctx.exception.expected)

    def test_missing_key(self):
        """Test {: 'x'} is a parse error"""
        with self.assertRaises(ParseError):
            self.parser.parse_node_pattern("(n:Person {: 'x'})")

    def test_trailing_comma(self):
        """Test trailing comma in property map"""
        with self.assertRaises(ParseError):
            self.parser.parse_node_pattern("(n:Person {name: 'Alice',})")

    def test_duplicate_key(self):
        """Test repeated property key"""
        with self.assertRaises(ParseError) as ctx:
            self.parser.parse_node_pattern("(n:Person {a: 1, a: 2})")

        self.assertIn('unique property key', ctx.exception.expected)

    def test_unclosed_pattern(self):
        """Test missing closing parenthesis"""
        with self.assertRaises(ParseError) as ctx:
            self.parser.parse_node_pattern("(n:Person")

        self.assertEqual(ctx.exception.found, 'end of input')
        self.assertEqual(ctx.exception.position, len("(n:Person"))

    def test_label_before_variable(self):
        """Test variable must come first"""
        with self.assertRaises(ParseError):
            self.parser.parse_node_pattern("(:Person n)")

    def test_missing_label_after_colon(self):
        """Test ':' must be followed by a label"""
        with self.assertRaises(ParseError):
            self.parser.parse_node_pattern("(n:)")

    def test_no_parentheses(self):
        """Test bare text is not a pattern"""
        with self.assertRaises(ParseError):
            self.parser.parse_node_pattern("n:Person")

    def test_unterminated_string(self):
        """Test lexer failure surfaces as LexError"""
        with self.assertRaises(LexError) as ctx:
            self.parser.parse_node_pattern("(n:Person {name: 'Alice})")

        self.assertEqual(ctx.exception.position, 17)
        self.assertIn('unterminated', ctx.exception.reason)

    def test_overflowing_number(self):
        """Test a number literal too large for a double"""
        with self.assertRaises(ParseError) as ctx:
            self.parser.parse_node_pattern("(n:P {x: 1e999})")

        self.assertEqual(ctx.exception.position, 9)
        self.assertEqual(ctx.exception.expected, ['finite number literal'])

    def test_invalid_character(self):
        """Test unknown character"""
        with self.assertRaises(LexError) as ctx:
            self.parser.parse_node_pattern("(n:Person@)")

        self.assertEqual(ctx.exception.position, 9)


class TestUnsupportedPatterns(unittest.TestCase):
    """Test constructs outside the single-node grammar"""

    def test_relationship_parses(self):
        """Test relationship chain parses into elements"""
        pattern = parse_pattern("(a:Person)-[r:KNOWS]->(b:Person)")

        path = pattern.paths[0]
        self.assertEqual(len(path.nodes), 2)
        self.assertEqual(len(path.relationships), 1)

        rel = path.relationships[0]
        self.assertEqual(rel.variable, 'r')
        self.assertEqual(rel.types, ['KNOWS'])
        self.assertEqual(rel.direction, Direction.OUTGOING)

    def test_relationship_directions(self):
        """Test incoming and undirected relationships"""
        incoming = parse_pattern("(a)<-[:LIKES]-(b)").paths[0].relationships[0]
        undirected = parse_pattern("(a)--(b)").paths[0].relationships[0]

        self.assertEqual(incoming.direction, Direction.INCOMING)
        self.assertEqual(incoming.types, ['LIKES'])
        self.assertEqual(undirected.direction, Direction.BOTH)

    def test_relationship_rejected(self):
        """Test single-node parse rejects relationships"""
        with self.assertRaises(UnsupportedConstruct) as ctx:
            parse_node_pattern("(a:Person)-[r:KNOWS]->(b:Person)")

        self.assertEqual(ctx.exception.construct, 'relationship pattern')
        self.assertEqual(ctx.exception.position, len("(a:Person)"))

    def test_multiple_nodes_rejected(self):
        """Test comma-separated patterns"""
        pattern = parse_pattern("(a:Person), (b:Company)")
        self.assertEqual(len(pattern.paths), 2)

        with self.assertRaises(UnsupportedConstruct) as ctx:
            parse_node_pattern("(a:Person), (b:Company)")

        self.assertEqual(ctx.exception.construct, 'multiple node patterns')


if __name__ == '__main__':
    unittest.main()
