"""
Accessor synthesis for classifier attributes.

Every owned attribute yields exactly two abstract methods: a getter and
either a setter (single valued) or an adder (collection valued).
Inherited attributes are not repeated; the extends clause covers them.
"""

from typing import List, Tuple

from ...logging_config import get_logger
from ...core.config import GenerationContext
from ...core.documentation import DocumentationTransfer
from ...core.model import Attribute, Classifier
from ...core.naming import NamingResolver
from ...core.tree import MethodDeclaration, ParameterDeclaration
from .types import JavaTypeResolver, resolve_element_type

logger = get_logger(__name__)


class AccessorSynthesizer:
    """Builds getter and setter/adder declarations for attributes."""

    def __init__(
        self,
        type_resolver: JavaTypeResolver,
        naming: NamingResolver,
        documentation: DocumentationTransfer,
    ):
        self.type_resolver = type_resolver
        self.naming = naming
        self.documentation = documentation

    def synthesize(
        self, classifier: Classifier, context: GenerationContext
    ) -> List[MethodDeclaration]:
        """Accessors for all owned attributes, in attribute order."""
        methods = []
        for attribute in classifier.attributes:
            methods.extend(self.accessors_for(classifier, attribute, context))
        return methods

    def accessors_for(
        self,
        classifier: Classifier,
        attribute: Attribute,
        context: GenerationContext,
    ) -> Tuple[MethodDeclaration, MethodDeclaration]:
        """
        Getter and setter/adder for one attribute.

        Multiplicity is decided by the upper bound alone: ``upper >= 0``
        gives ``T getX()`` / ``void setX(T x)``, a negative upper bound
        gives ``Collection<T> getXs()`` / ``void addX(T x)``.
        """
        logger.debug(
            "Class: %s - Property: %s - Upper: %d - Lower: %d",
            classifier.name,
            attribute.name,
            attribute.upper,
            attribute.lower,
        )

        element_type = resolve_element_type(
            self.type_resolver,
            attribute.type,
            context,
            classifier.qualified_name,
            attribute.name,
        )

        if attribute.is_many:
            return_type = resolve_element_type(
                self.type_resolver,
                attribute.type,
                context,
                classifier.qualified_name,
                attribute.name,
                collection=True,
            )
            mutator_name = self.naming.adder_name(attribute.name)
            parameter_name = self.naming.singularize(attribute.name)
        else:
            return_type = element_type
            mutator_name = self.naming.setter_name(attribute.name)
            parameter_name = attribute.name

        getter = MethodDeclaration(
            name=self.naming.getter_name(attribute.name),
            return_type=return_type.name,
            javadoc=self.documentation.to_javadoc(attribute.comments),
        )

        mutator = MethodDeclaration(
            name=mutator_name,
            return_type="void",
            parameters=[
                ParameterDeclaration(
                    name=self.naming.property_parameter_name(parameter_name),
                    type=element_type.name,
                )
            ],
            javadoc=self.documentation.to_javadoc(attribute.comments),
        )

        return getter, mutator
