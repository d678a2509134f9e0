from schemagraph import link_mutation_triggers

from tests.helpers.definitions import directive_def, type_def


def _mutation():
    return type_def(
        "mutation",
        "RootMutationType",
        fields={"createPost": {"type": "post"}, "deletePost": {"type": "post"}},
    )


def _subscription(triggers):
    return type_def(
        "subscription",
        "RootSubscriptionType",
        fields={"postChanged": {"type": "post", "triggers": triggers}},
    )


def test_trigger_linked_onto_named_mutation_field():
    user = type_def("user", "User")
    definitions = [user, _mutation(), _subscription([({"createPost"}, "cfg1")])]

    linked = link_mutation_triggers(definitions)

    mutation = linked[1]
    assert mutation.fields["createPost"] == {"type": "post", "triggers": [("postChanged", "cfg1")]}
    assert mutation.fields["deletePost"] == {"type": "post"}
    assert linked[0] is user
    assert linked[2] is definitions[2]


def test_no_subscription_leaves_mutation_untouched():
    mutation = _mutation()
    linked = link_mutation_triggers([mutation])
    assert linked == [mutation]
    assert "triggers" not in linked[0].fields["createPost"]


def test_no_mutation_is_noop():
    subscription = _subscription([({"createPost"}, "cfg1")])
    assert link_mutation_triggers([subscription]) == [subscription]


def test_triggers_collected_in_subscription_field_order():
    subscription = type_def(
        "subscription",
        "RootSubscriptionType",
        fields={
            "postChanged": {"triggers": [({"createPost", "deletePost"}, "a")]},
            "feed": {"triggers": [({"deletePost"}, "b"), ({"createPost"}, "c")]},
            "quiet": {},
        },
    )

    linked = link_mutation_triggers([_mutation(), subscription])

    fields = linked[0].fields
    assert fields["createPost"]["triggers"] == [("postChanged", "a"), ("feed", "c")]
    assert fields["deletePost"]["triggers"] == [("postChanged", "a"), ("feed", "b")]


def test_linking_does_not_mutate_input():
    mutation = _mutation()
    link_mutation_triggers([mutation, _subscription([({"createPost"}, "cfg1")])])
    assert "triggers" not in mutation.fields["createPost"]


def test_directive_named_mutation_is_not_a_root_type():
    directive = directive_def("mutation", "mutation")
    mutation = _mutation()
    subscription = _subscription([({"createPost"}, "cfg1")])

    linked = link_mutation_triggers([directive, mutation, subscription])

    assert linked[0] is directive
    assert linked[1].fields["createPost"]["triggers"] == [("postChanged", "cfg1")]


def test_directive_named_subscription_is_ignored():
    mutation = _mutation()
    linked = link_mutation_triggers([mutation, directive_def("subscription", "subscription")])
    assert linked[0] is mutation
