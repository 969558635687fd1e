'''
Node model tests.

'''

import unittest

import numpy as np
from frozendict import frozendict

import scadscript as base
from scadscript.modifier import ScadModifiers


class Test(unittest.TestCase):

    def testCubeConstruction(self):
        obj = base.cube(2)
        self.assertEqual(obj.kind, 'cube')
        self.assertEqual(obj.properties, {'size': 2})
        self.assertIsInstance(obj.properties, frozendict)
        self.assertEqual(obj.dimensions, 3)

    def testCenterFollowsShapeProperties(self):
        obj = base.cube([1, 2, 3], True)
        self.assertEqual(list(obj.properties.keys()), ['size', 'center'])
        self.assertEqual(obj.properties['size'], (1, 2, 3))
        self.assertEqual(obj.properties['center'], base.OSC_TRUE)

    def testSquareIs2D(self):
        self.assertEqual(base.square(1).dimensions, 2)
        self.assertEqual(base.circle(1).dimensions, 2)
        self.assertEqual(base.sphere(1).dimensions, 3)

    def testCylinderConstruction(self):
        obj = base.cylinder(10, 11)
        self.assertEqual(dict(obj.properties), {'h': 10, 'r': 11})

        obj = base.cylinder(10, (4, 2), False)
        self.assertEqual(list(obj.properties.keys()), ['h', 'r1', 'r2', 'center'])
        self.assertEqual(obj.properties['r1'], 4)
        self.assertEqual(obj.properties['r2'], 2)

    def testCylinderNumpyRadius(self):
        obj = base.cylinder(1, np.array([3.0, 1.0]))
        self.assertEqual(obj.properties['r1'], 3.0)
        self.assertIsInstance(obj.properties['r1'], float)

    def testCylinderRadiusPairLength(self):
        self.assertRaisesRegex(
            base.ConversionException, 'cylinder radius', base.cylinder, 1, [2])
        self.assertRaises(base.ConversionException, base.cylinder, 1, (3, 2, 1))
        self.assertRaises(base.ConversionException, base.cylinder, 1, np.array([1.0, 2.0, 3.0]))

    def testTextDropsMissingParameters(self):
        obj = base.text('hi')
        self.assertEqual(dict(obj.properties), {'text': 'hi'})
        obj = base.text('hi', 5, 'Liberation Sans')
        self.assertEqual(list(obj.properties.keys()), ['text', 'size', 'font'])

    def testUpdateFirstWins(self):
        obj = base.sphere(3).update({'r': 5})
        self.assertEqual(obj.properties['r'], 3)

        obj = base.square(1).update({'center': True}).update({'center': False})
        self.assertEqual(obj.properties['center'], base.OSC_TRUE)

        obj = base.polygon([[0, 0], [1, 0], [0, 1]]).update({'r': 5}).update({'r': 9})
        self.assertEqual(obj.properties['r'], 5)

    def testUpdateAddsNewProperties(self):
        obj = base.circle(2).update(_fn=32)
        self.assertEqual(obj.properties['$fn'], 32)
        self.assertEqual(obj.properties['r'], 2)
        self.assertEqual(list(obj.properties.keys()), ['$fn', 'r'])

    def testUpdateDoesNotMutate(self):
        obj = base.circle(2)
        updated = obj.update({'$fa': 12})
        self.assertNotIn('$fa', obj.properties)
        self.assertIn('$fa', updated.properties)

    def testModifiersAreNotShared(self):
        shared = base.cube(1)
        debugged = shared.debug()
        self.assertIsNone(shared.modifier)
        self.assertEqual(debugged.modifier, base.DEBUG)
        self.assertEqual(shared.get_modifiers(), '')
        self.assertEqual(debugged.get_modifiers(), '#')

    def testModifiersLastWins(self):
        obj = base.cube(1).disable().debug()
        self.assertEqual(obj.get_modifiers(), '#')
        self.assertFalse(obj.has_modifier(base.DISABLE))
        self.assertTrue(obj.has_modifier(base.DEBUG))
        self.assertEqual(obj.only().get_modifiers(), '!')
        self.assertEqual(obj.background().get_modifiers(), '%')
        self.assertEqual(obj.remove_modifier().get_modifiers(), '')

    def testModifiersMixinIsAbstract(self):
        self.assertRaises(TypeError, ScadModifiers)
        self.assertIsInstance(base.cube(1), ScadModifiers)

    def testInvalidModifier(self):
        self.assertRaisesRegex(
            base.InvalidModifier, '.*x.*not a valid.*', base.cube(1).add_modifier, 'x')

    def testDerivedNodesShareChildren(self):
        child = base.sphere(1)
        obj = base.union(child, base.cube(1))
        disabled = obj.disable()
        self.assertIs(disabled.children, obj.children)
        self.assertIs(disabled.children[0], child)

    def testLinearExtrude(self):
        obj = base.square(2).linearExtrude(10, True)
        self.assertIsInstance(obj, base.LinearExtrude)
        self.assertEqual(obj.kind, 'linear_extrude')
        self.assertEqual(list(obj.properties.keys()), ['height', 'center'])
        self.assertEqual(obj.children, (base.square(2),))

        obj = base.circle(1).linear_extrude(3)
        self.assertEqual(dict(obj.properties), {'height': 3})

    def testTransformationParam(self):
        obj = base.translate([1, 0, 0], base.cube(2))
        self.assertEqual(obj.kind, 'translate')
        self.assertEqual(obj.param, (1, 0, 0))
        self.assertEqual(len(obj.children), 1)

    def testFluentTransformations(self):
        obj = base.cube(1).translate([1, 2, 3]).rotate(45).color('red')
        self.assertEqual(obj.kind, 'color')
        self.assertEqual(obj.children[0].kind, 'rotate')
        self.assertEqual(obj.children[0].children[0].kind, 'translate')

    def testCallAppendsChildren(self):
        obj = base.translate([1, 0, 0])
        appended = obj(base.cube(1), base.sphere(1))
        self.assertEqual(obj.children, ())
        self.assertEqual(len(appended.children), 2)

    def testShapesHaveNoChildren(self):
        obj = base.cube(1)
        self.assertFalse(obj.can_have_children())
        self.assertEqual(obj.children_nodes(), ())
        self.assertRaisesRegex(
            base.NotParentException, 'cube can not have children', obj.append, base.sphere(1))
        self.assertTrue(base.union().can_have_children())

    def testOperators(self):
        a = base.cube(1)
        b = base.sphere(1)
        self.assertEqual((a + b).kind, 'union')
        self.assertEqual((a - b).kind, 'difference')
        self.assertEqual((a & b).kind, 'intersection')
        self.assertEqual((a * b).kind, 'intersection')
        self.assertEqual((a - b).children, (a, b))

    def testNoneChildrenAreKept(self):
        obj = base.union(base.cube(1), None)
        self.assertEqual(obj.children, (base.cube(1), None))
        self.assertEqual(obj.children_nodes(), (base.cube(1),))

    def testNonNodeChildRaises(self):
        self.assertRaisesRegex(
            base.InvalidNode, 'Cannot use object .* as child node', base.union, base.cube(1), 3)

    def testUnsupportedValueRaises(self):
        self.assertRaises(base.ConversionException, base.cube, object())

    def testEquality(self):
        self.assertEqual(base.cube(1, True), base.cube(1, True))
        self.assertNotEqual(base.cube(1), base.cube(1).debug())
        self.assertEqual(hash(base.union(base.cube(1))), hash(base.union(base.cube(1))))

    def testNodesAreFrozen(self):
        obj = base.cube(1)
        with self.assertRaises(AttributeError):
            obj.kind = 'sphere'

    def testRawChildren(self):
        obj = base.raw('$fn = 10')
        self.assertFalse(obj.has_children())
        obj = base.raw('render()', base.cube(1))
        self.assertTrue(obj.has_children())
        self.assertEqual(obj.command, 'render()')

    def testRawTextHook(self):
        lines = []
        with base.Raw.text_hook(lines.append):
            base.Raw.text('// header')
        self.assertEqual(lines, ['// header'])
        self.assertRaises(base.RawTextHookNotSet, base.Raw.text, '// later')


if __name__ == "__main__":
    unittest.main()
