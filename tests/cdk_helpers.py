import aws_cdk as cdk

TEST_ENV = cdk.Environment(account="123456789012", region="us-east-1")


def new_stack(stack_id: str = "TestStack") -> cdk.Stack:
    app = cdk.App()
    return cdk.Stack(app, stack_id, env=TEST_ENV)
